# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sweep orchestrator for dnnbench."""

import logging
import time

from dnnbench.common.exceptions import BenchmarkRunError, NonZeroExitError
from dnnbench.orchestrator.models import RunConfig, RunResult
from dnnbench.orchestrator.runner import BenchmarkRunner
from dnnbench.orchestrator.strategies import ExecutionStrategy
from dnnbench.timings.duration import Baseline

logger = logging.getLogger(__name__)

__all__ = [
    "SweepOrchestrator",
]


class SweepOrchestrator:
    """Runs the configurations chosen by a strategy, one at a time.

    The strategy decides:
    - What to run next (which config)
    - When to stop
    - How to label runs
    - Cooldown duration between runs

    A single baseline instant is captured when execution starts and shared by
    every run, so timestamps from different runs are comparable. Per-run
    failures are recorded in the results and never stop the sweep.
    """

    def __init__(self, runner: BenchmarkRunner | None = None):
        """Initialize SweepOrchestrator.

        Args:
            runner: Runner used to execute each configuration
        """
        self.runner = runner if runner is not None else BenchmarkRunner()

    def execute(self, strategy: ExecutionStrategy) -> list[RunResult]:
        """Execute runs based on strategy.

        Args:
            strategy: Execution strategy that decides what to run

        Returns:
            List of RunResult, one per run executed, in execution order
        """
        results: list[RunResult] = []
        run_index = 0

        logger.info(f"Starting sweep with strategy: {strategy.__class__.__name__}")

        # Set the start time. This will be used to timestamp all measurements.
        baseline = Baseline.capture()

        should_continue = strategy.should_continue(results)

        while should_continue:
            config = strategy.get_next_config(results)
            label = strategy.get_run_label(run_index)

            logger.info(f"[{run_index + 1}] Executing {label}...")

            result = self._execute_single_run(baseline, config, label)
            results.append(result)

            if result.success:
                logger.info(
                    f"[{run_index + 1}] {label} completed successfully "
                    f"({len(result.events)} events)"
                )
            else:
                logger.error(f"[{run_index + 1}] {label} failed: {result.error}")

            run_index += 1

            should_continue = strategy.should_continue(results)

            # Apply cooldown only if there's another run coming
            if should_continue:
                cooldown = strategy.get_cooldown_seconds()
                if cooldown > 0:
                    logger.info(f"Applying cooldown: {cooldown}s")
                    time.sleep(cooldown)

        successful = sum(1 for r in results if r.success)
        logger.info(f"All runs complete: {successful}/{len(results)} successful")

        return results

    def _execute_single_run(
        self, baseline: Baseline, config: RunConfig, label: str
    ) -> RunResult:
        """Execute a single benchmark run.

        Args:
            baseline: Shared sweep start instant
            config: Configuration to run
            label: Label of the run

        Returns:
            RunResult with events or the error that ended the run
        """
        try:
            events = self.runner.run(
                baseline,
                config.container,
                config.net,
                config.batch_size,
                config.gpu,
            )
        except BenchmarkRunError as e:
            return RunResult(
                label=label,
                config=config,
                error=str(e),
                error_type=e.error_type,
                returncode=e.returncode if isinstance(e, NonZeroExitError) else None,
            )

        return RunResult(
            label=label, config=config, events=tuple(events), returncode=0
        )
