# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runs one containerized benchmark job and collects its timing events."""

import logging
import os
import shlex
import signal
import subprocess
from collections.abc import Sequence

from dnnbench.common.environment import Environment
from dnnbench.common.exceptions import (
    LaunchError,
    MalformedMeasurementError,
    NonZeroExitError,
    UnexpectedTerminationError,
)
from dnnbench.timings.duration import Baseline
from dnnbench.timings.events import BenchmarkEvent
from dnnbench.timings.extractor import extract

logger = logging.getLogger(__name__)

__all__ = [
    "BenchmarkRunner",
]


class BenchmarkRunner:
    """Launches benchmark containers and parses their diagnostic output.

    Each call to ``run`` starts exactly one process:

        <launcher> run --rm -i <container> <net> <batch_size>

    with the GPU index passed through ``gpu_env_var``. Standard input is the
    null device and standard output is discarded. Standard error is read line by
    line while the job runs, so event timestamps reflect when each line arrived.
    """

    def __init__(
        self,
        launcher: Sequence[str] | str | None = None,
        gpu_env_var: str | None = None,
    ) -> None:
        """Initialize BenchmarkRunner.

        Args:
            launcher: Launcher command, either pre-split or a string split with
                shell rules. Defaults to DNNBENCH_RUNNER_LAUNCHER.
            gpu_env_var: Environment variable carrying the GPU index. Defaults to
                DNNBENCH_RUNNER_GPU_ENV_VAR.

        Raises:
            ValueError: If the launcher command is empty
        """
        if launcher is None:
            launcher = Environment.RUNNER.LAUNCHER
        if isinstance(launcher, str):
            launcher = shlex.split(launcher)
        if not launcher:
            raise ValueError("Launcher command must not be empty")

        self.launcher = list(launcher)
        self.gpu_env_var = gpu_env_var or Environment.RUNNER.GPU_ENV_VAR

    def build_command(self, container: str, net: str, batch_size: int) -> list[str]:
        return [*self.launcher, "run", "--rm", "-i", container, net, str(batch_size)]

    def build_env(self, gpu: int) -> dict[str, str]:
        env = os.environ.copy()
        env[self.gpu_env_var] = str(gpu)
        return env

    def run(
        self,
        baseline: Baseline,
        container: str,
        net: str,
        batch_size: int,
        gpu: int,
    ) -> list[BenchmarkEvent]:
        """Run one benchmark job to completion.

        Args:
            baseline: Shared sweep start instant used to timestamp events
            container: Container image to run
            net: Network definition passed to the container
            batch_size: Batch size passed to the container
            gpu: GPU index exported through the GPU environment variable

        Returns:
            Events in the order their lines were read. Empty if the job exited
            successfully without printing any recognized line.

        Raises:
            LaunchError: If the process could not be started
            MalformedMeasurementError: If a recognized line carried an invalid
                value. The process is killed before the error propagates.
            UnexpectedTerminationError: If the process was killed by a signal
            NonZeroExitError: If the process exited with a non-zero status
        """
        logger.info(
            f"launching Docker container (container: {container}, net: {net}, "
            f"batch_size: {batch_size}, gpu: {gpu})"
        )

        try:
            process = subprocess.Popen(
                self.build_command(container, net, batch_size),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                env=self.build_env(gpu),
                text=True,
                errors="replace",
                bufsize=1,
            )
        except (OSError, ValueError) as e:
            raise LaunchError(
                f"failed to execute process {self.launcher[0]}: {e}"
            ) from e

        logger.info("process launched, parsing output")

        events: list[BenchmarkEvent] = []
        # Popen's context manager closes the pipe and waits for the process on every exit path
        with process:
            try:
                # Drain stderr completely before waiting, otherwise a full pipe blocks the child
                for line in process.stderr:
                    logger.debug(f"child stderr line: {line!r}")
                    events.extend(extract(line, baseline))
            except MalformedMeasurementError:
                logger.error(
                    f"Malformed measurement from {container}/{net}, killing process"
                )
                process.kill()
                raise
            except BaseException:
                # Popen.__exit__ waits for the child, so it must not outlive the error
                logger.error(
                    f"Error while reading output of {container}/{net}, killing process"
                )
                process.kill()
                raise
            returncode = process.wait()

        if returncode < 0:
            logger.warning(
                f"child process killed by {_signal_name(-returncode)}, "
                f"discarding {len(events)} events"
            )
            raise UnexpectedTerminationError(-returncode)
        if returncode != 0:
            logger.warning(
                f"child process exited with code {returncode}, "
                f"discarding {len(events)} events"
            )
            raise NonZeroExitError(returncode)

        logger.info(f"finished with {len(events)} events")
        return events


def _signal_name(signal_number: int) -> str:
    try:
        return signal.Signals(signal_number).name
    except ValueError:
        return f"signal {signal_number}"
