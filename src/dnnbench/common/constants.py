# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1_000
NANOS_PER_MILLIS = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
