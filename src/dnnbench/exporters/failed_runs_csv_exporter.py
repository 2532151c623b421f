# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for failed runs."""

import csv
import io

from dnnbench.exporters.base_exporter import BaseExporter


class FailedRunsCsvExporter(BaseExporter):
    """Exports one row per failed run with the error that ended it."""

    HEADER = ["container", "net", "batch_size", "gpu", "error"]

    def get_file_name(self) -> str:
        return "failed.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(self.HEADER)

        for result in self._results:
            if result.success:
                continue
            config = result.config
            writer.writerow(
                [
                    config.container,
                    config.net,
                    config.batch_size,
                    config.gpu,
                    result.error,
                ]
            )

        return buf.getvalue()
