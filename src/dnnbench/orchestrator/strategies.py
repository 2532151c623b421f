# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Execution strategies for benchmark sweeps."""

import itertools
import logging
import random
from abc import ABC, abstractmethod

from dnnbench.common.config import SweepConfig
from dnnbench.orchestrator.models import RunConfig, RunResult

logger = logging.getLogger(__name__)

__all__ = [
    "CartesianSweepStrategy",
    "ExecutionStrategy",
]


class ExecutionStrategy(ABC):
    """Base class for execution strategies.

    Strategies decide:
    1. What config to run next (based on results so far)
    2. Whether to continue or stop
    3. How to label runs
    4. Cooldown duration between runs
    """

    @abstractmethod
    def should_continue(self, results: list[RunResult]) -> bool:
        """Decide whether to run another configuration.

        Args:
            results: Results from runs executed so far

        Returns:
            True if should run another configuration, False to stop
        """
        pass

    @abstractmethod
    def get_next_config(self, results: list[RunResult]) -> RunConfig:
        """Return the configuration for the next run.

        Args:
            results: Results from runs executed so far

        Returns:
            Configuration for next run
        """
        pass

    @abstractmethod
    def get_run_label(self, run_index: int) -> str:
        """Generate label for run at given index.

        Args:
            run_index: Zero-based index of run

        Returns:
            Label for run (e.g., "0001_benchmark-caffe_alexnet_b64_gpu0")
        """
        pass

    @abstractmethod
    def get_cooldown_seconds(self) -> float:
        """Return cooldown duration between runs."""
        pass


class CartesianSweepStrategy(ExecutionStrategy):
    """Strategy that runs every combination of container, GPU, net and batch size once.

    The full configuration space is built up front in container, GPU, net,
    batch size order and, when ``shuffle`` is set, evaluated in a random order
    so slow drift on the machine does not correlate with any single parameter.

    Attributes:
        configs: Configurations in evaluation order
        cooldown_seconds: Sleep duration between runs
    """

    def __init__(
        self,
        containers: list[str],
        gpus: list[int],
        nets: list[str],
        batch_sizes: list[int],
        shuffle: bool = True,
        random_seed: int | None = None,
        cooldown_seconds: float = 0.0,
    ) -> None:
        """Initialize CartesianSweepStrategy.

        Args:
            containers: Container images to benchmark
            gpus: GPU indices to run on
            nets: Network definitions
            batch_sizes: Batch sizes
            shuffle: Evaluate configurations in a random order
            random_seed: Seed for the shuffle. Random when None.
            cooldown_seconds: Sleep duration between runs (must be >= 0)

        Raises:
            ValueError: If cooldown_seconds < 0 or the configuration space is empty
        """
        if cooldown_seconds < 0:
            raise ValueError(
                f"Invalid cooldown duration: {cooldown_seconds} seconds. "
                f"Cooldown must be non-negative (0 or greater)."
            )

        self.configs = [
            RunConfig(container=c, net=n, batch_size=b, gpu=g)
            for c, g, n, b in itertools.product(containers, gpus, nets, batch_sizes)
        ]
        if not self.configs:
            raise ValueError(
                "Sweep requires at least one container, GPU, net and batch size."
            )

        if shuffle:
            random.Random(random_seed).shuffle(self.configs)

        self.cooldown_seconds = cooldown_seconds

    @classmethod
    def from_config(cls, config: SweepConfig) -> "CartesianSweepStrategy":
        return cls(
            containers=config.containers,
            gpus=config.gpus,
            nets=config.nets,
            batch_sizes=config.batch_sizes,
            shuffle=config.shuffle,
            random_seed=config.random_seed,
            cooldown_seconds=config.cooldown_seconds,
        )

    def should_continue(self, results: list[RunResult]) -> bool:
        """Continue until every configuration has been run."""
        return len(results) < len(self.configs)

    def get_next_config(self, results: list[RunResult]) -> RunConfig:
        return self.configs[len(results)]

    def get_run_label(self, run_index: int) -> str:
        """Generate label: 0001_benchmark-caffe_alexnet_b64_gpu0, etc."""
        config = self.configs[run_index]
        return (
            f"{run_index + 1:04d}_{config.container}_{config.net}"
            f"_b{config.batch_size}_gpu{config.gpu}"
        )

    def get_cooldown_seconds(self) -> float:
        """Return configured cooldown duration."""
        return self.cooldown_seconds
