# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sweep orchestration: configuration space, job execution and results."""

from dnnbench.orchestrator.models import RunConfig, RunResult
from dnnbench.orchestrator.orchestrator import SweepOrchestrator
from dnnbench.orchestrator.runner import BenchmarkRunner
from dnnbench.orchestrator.strategies import CartesianSweepStrategy, ExecutionStrategy

__all__ = [
    "BenchmarkRunner",
    "CartesianSweepStrategy",
    "ExecutionStrategy",
    "RunConfig",
    "RunResult",
    "SweepOrchestrator",
]
