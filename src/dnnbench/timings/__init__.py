# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Timing events and their extraction from benchmark output."""

from dnnbench.timings.duration import Baseline, Duration, decode_milliseconds
from dnnbench.timings.events import (
    AverageBackward,
    AverageForward,
    AverageForwardBackward,
    BenchmarkEvent,
    IterationStep,
    LayerBackward,
    LayerForward,
)
from dnnbench.timings.extractor import extract

__all__ = [
    "AverageBackward",
    "AverageForward",
    "AverageForwardBackward",
    "Baseline",
    "BenchmarkEvent",
    "Duration",
    "IterationStep",
    "LayerBackward",
    "LayerForward",
    "decode_milliseconds",
    "extract",
]
