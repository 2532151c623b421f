# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters that write sweep results to disk."""

from dnnbench.exporters.average_timings_csv_exporter import AverageTimingsCsvExporter
from dnnbench.exporters.base_exporter import BaseExporter
from dnnbench.exporters.events_json_exporter import EventsJsonExporter
from dnnbench.exporters.exporter_config import ExporterConfig
from dnnbench.exporters.failed_runs_csv_exporter import FailedRunsCsvExporter

__all__ = [
    "AverageTimingsCsvExporter",
    "BaseExporter",
    "EventsJsonExporter",
    "ExporterConfig",
    "FailedRunsCsvExporter",
]
