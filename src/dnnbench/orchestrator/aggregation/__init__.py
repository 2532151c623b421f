# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Aggregation of run results for tabulation."""

from dnnbench.orchestrator.aggregation.averages import (
    AverageTimings,
    summarize_averages,
)

__all__ = [
    "AverageTimings",
    "summarize_averages",
]
