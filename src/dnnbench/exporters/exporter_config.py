# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for result exporters."""

from dataclasses import dataclass
from pathlib import Path

from dnnbench.orchestrator.models import RunResult


@dataclass(slots=True)
class ExporterConfig:
    """Configuration for result exporters.

    Attributes:
        results: Results of the sweep, in execution order
        output_dir: Directory where export file will be written
    """

    results: list[RunResult]
    output_dir: Path
