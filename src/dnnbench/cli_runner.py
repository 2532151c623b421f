# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from dnnbench.common.config import SweepConfig
from dnnbench.common.exceptions import TabulationError

if TYPE_CHECKING:
    from dnnbench.exporters import ExporterConfig
    from dnnbench.orchestrator.models import RunResult

logger = logging.getLogger(__name__)


def run_sweep(config: SweepConfig, log_level: str | None = None) -> list["RunResult"]:
    """Run the full benchmark sweep and write its result tables.

    Writes ``failed.csv`` first, then ``valid.csv`` and, if enabled,
    ``events.json`` into ``config.output_dir``.

    Exits with status 1 if a successful run cannot be tabulated.
    """
    from dnnbench.common.logging import setup_rich_logging
    from dnnbench.exporters import ExporterConfig
    from dnnbench.orchestrator import CartesianSweepStrategy, SweepOrchestrator

    setup_rich_logging(log_level)

    logger.info("=" * 80)
    logger.info("Starting Benchmark Sweep")
    logger.info(f"  Containers: {config.containers}")
    logger.info(f"  GPUs: {config.gpus}")
    logger.info(f"  Nets: {config.nets}")
    logger.info(f"  Batch sizes: {config.batch_sizes}")
    logger.info(f"  Configurations: {config.num_configurations}")
    logger.info(
        f"  Order: {'shuffled' if config.shuffle else 'sequential'}"
        + (f" (seed {config.random_seed})" if config.random_seed is not None else "")
    )
    if config.cooldown_seconds > 0:
        logger.info(f"  Cooldown between runs: {config.cooldown_seconds}s")
    logger.info("=" * 80)

    strategy = CartesianSweepStrategy.from_config(config)
    orchestrator = SweepOrchestrator()

    results = orchestrator.execute(strategy)

    _print_sweep_summary(results)

    exporter_config = ExporterConfig(results=results, output_dir=config.output_dir)
    try:
        paths = asyncio.run(_export_results(exporter_config, config.export_events))
    except TabulationError:
        logger.exception("Error tabulating results")
        sys.exit(1)

    for path in paths:
        logger.info(f"Results written to: {path}")

    return results


async def _export_results(
    exporter_config: "ExporterConfig", export_events: bool
) -> list[Path]:
    """Write result files in order: failed runs, averages, events.

    Args:
        exporter_config: Exporter configuration
        export_events: Also write the per-run event timeline

    Returns:
        Paths of the written files
    """
    from dnnbench.exporters import (
        AverageTimingsCsvExporter,
        EventsJsonExporter,
        FailedRunsCsvExporter,
    )

    exporters = [
        FailedRunsCsvExporter(exporter_config),
        AverageTimingsCsvExporter(exporter_config),
    ]
    if export_events:
        exporters.append(EventsJsonExporter(exporter_config))

    # Sequential so failed.csv exists even if valid.csv cannot be tabulated
    paths = []
    for exporter in exporters:
        paths.append(await exporter.export())
    return paths


def _print_sweep_summary(results: list["RunResult"]) -> None:
    """Log how many runs succeeded and why the others failed."""
    from collections import Counter

    successful_runs = [r for r in results if r.success]
    failed_runs = [r for r in results if not r.success]

    logger.info("=" * 80)
    logger.info(f"Sweep summary: {len(successful_runs)}/{len(results)} runs successful")
    if failed_runs:
        by_type = Counter(r.error_type.value for r in failed_runs)
        for error_type, count in sorted(by_type.items()):
            logger.warning(f"  {error_type}: {count}")
        logger.warning(f"Failed runs: {', '.join(r.label for r in failed_runs)}")
    logger.info("=" * 80)
