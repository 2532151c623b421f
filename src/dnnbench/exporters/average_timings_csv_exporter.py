# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for average timings of successful runs."""

import csv
import io

from dnnbench.exporters.base_exporter import BaseExporter
from dnnbench.orchestrator.aggregation import summarize_averages


class AverageTimingsCsvExporter(BaseExporter):
    """Exports one row per successful run with its average pass times in seconds.

    Every successful run must report each average exactly once. A run that
    does not raises a TabulationError instead of writing a placeholder value.
    """

    HEADER = ["container", "net", "batch_size", "gpu", "forward", "backward", "total"]

    def get_file_name(self) -> str:
        return "valid.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(self.HEADER)

        for result in self._results:
            if not result.success:
                continue
            averages = summarize_averages(result)
            config = result.config
            writer.writerow(
                [
                    config.container,
                    config.net,
                    config.batch_size,
                    config.gpu,
                    averages.forward,
                    averages.backward,
                    averages.total,
                ]
            )

        return buf.getvalue()
