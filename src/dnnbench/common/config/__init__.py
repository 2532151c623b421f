# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dnnbench.common.config.config_defaults import SweepDefaults
from dnnbench.common.config.sweep_config import SweepConfig

__all__ = [
    "SweepConfig",
    "SweepDefaults",
]
