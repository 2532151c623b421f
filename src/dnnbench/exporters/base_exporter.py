# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for result exporters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from dnnbench.exporters.exporter_config import ExporterConfig

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """Writes sweep results to a single file in the output directory.

    Subclasses provide the file name and the file content; the base class
    handles directory creation and the (threaded) file write.
    """

    def __init__(self, config: ExporterConfig) -> None:
        self._results = config.results
        self._output_dir = Path(config.output_dir)

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the name of the file this exporter writes."""

    @abstractmethod
    def _generate_content(self) -> str:
        """Build the full file content."""

    async def export(self) -> Path:
        """Write the export file.

        Returns:
            Path: Path of the written file
        """
        # Generate before touching the filesystem so a tabulation error leaves no partial file
        content = self._generate_content()
        file_path = self._output_dir / self.get_file_name()

        await asyncio.to_thread(self._output_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(
            file_path.write_text, content, encoding="utf-8", newline=""
        )

        logger.debug(f"Wrote {file_path}")
        return file_path
