# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for dnnbench tests."""

import sys
import textwrap
from pathlib import Path

import pytest

from dnnbench.orchestrator.models import RunConfig, RunResult
from dnnbench.timings.duration import Duration, decode_milliseconds
from dnnbench.timings.events import (
    AverageBackward,
    AverageForward,
    AverageForwardBackward,
    IterationStep,
    LayerForward,
)


class FixedBaseline:
    """Baseline stand-in whose elapsed time is set by the test."""

    def __init__(self, elapsed_nanos: int = 1_500_000_000) -> None:
        self.elapsed_nanos = elapsed_nanos
        self.calls = 0

    def elapsed(self) -> Duration:
        self.calls += 1
        return Duration.from_nanos(self.elapsed_nanos)


@pytest.fixture
def fixed_baseline() -> FixedBaseline:
    return FixedBaseline()


# Stand-in for the container launcher. Invoked as
#   python fake_launcher.py run --rm -i <container> <net> <batch_size>
# and the container name selects the behavior.
_FAKE_LAUNCHER = textwrap.dedent(
    """
    import os
    import signal
    import sys
    import time

    _, run, rm, interactive, container, net, batch_size = sys.argv

    def err(line):
        print(line, file=sys.stderr, flush=True)

    print("stdout is not parsed: Average Forward pass: 9.9 ms.", flush=True)
    err(f"args {run} {rm} {interactive} {container} {net} {batch_size}")
    err(f"gpu={os.environ.get('NV_GPU')}")
    err("Net initialized.")

    if container == "ok":
        err("Iteration: 1 forward-backward time: 12.34 ms.")
        err("conv1\\tforward: 0.5 ms.")
        err("conv1\\tbackward: 0.75 ms.")
        err("Average Forward pass: 1.0 ms.")
        err("Average Backward pass: 2.0 ms.")
        err("Average Forward-Backward: 3.0 ms.")
        sys.exit(0)
    if container == "silent":
        sys.exit(0)
    if container == "slow":
        err("Iteration: 1 forward-backward time: 1.0 ms.")
        time.sleep(0.3)
        err("Iteration: 2 forward-backward time: 1.0 ms.")
        sys.exit(0)
    if container == "fail":
        err("Iteration: 1 forward-backward time: 12.34 ms.")
        err("Check failed: out of memory")
        sys.exit(1)
    if container == "crash":
        err("Iteration: 1 forward-backward time: 12.34 ms.")
        os.kill(os.getpid(), signal.SIGKILL)
    if container == "malformed":
        err("Average Forward pass: . ms.")
        time.sleep(30)
        sys.exit(0)
    if container == "overflow":
        err("Average Forward pass: " + "9" * 400 + ". ms.")
        time.sleep(30)
        sys.exit(0)
    if container == "binary":
        sys.stderr.flush()
        sys.stderr.buffer.write(b"\\xff\\xfe not utf-8\\n")
        sys.stderr.buffer.flush()
        err("Average Forward pass: 1.0 ms.")
        sys.exit(0)
    if container == "flood":
        for i in range(20000):
            err(f"Iteration: {i} forward-backward time: 1.5 ms.")
        sys.exit(0)
    sys.exit(3)
    """
)


@pytest.fixture
def fake_launcher(tmp_path: Path) -> list[str]:
    """Launcher command that runs a scripted fake container."""
    script = tmp_path / "fake_launcher.py"
    script.write_text(_FAKE_LAUNCHER)
    return [sys.executable, str(script)]


@pytest.fixture
def run_config() -> RunConfig:
    return RunConfig(container="benchmark-caffe", net="alexnet", batch_size=64, gpu=0)


def make_successful_result(
    config: RunConfig,
    label: str = "0001_benchmark-caffe_alexnet_b64_gpu0",
    forward_ms: float = 1.0,
    backward_ms: float = 2.0,
    total_ms: float = 3.0,
) -> RunResult:
    timestamp = Duration(seconds=1, nanos=0)
    events = (
        IterationStep(
            timestamp=timestamp, iteration=0, duration=decode_milliseconds(12.34)
        ),
        LayerForward(
            timestamp=timestamp, layer="conv1", duration=decode_milliseconds(0.5)
        ),
        AverageForward(timestamp=timestamp, duration=decode_milliseconds(forward_ms)),
        AverageBackward(timestamp=timestamp, duration=decode_milliseconds(backward_ms)),
        AverageForwardBackward(
            timestamp=timestamp, duration=decode_milliseconds(total_ms)
        ),
    )
    return RunResult(label=label, config=config, events=events, returncode=0)


@pytest.fixture
def successful_result(run_config: RunConfig) -> RunResult:
    return make_successful_result(run_config)


@pytest.fixture
def result_factory():
    """Factory for successful RunResults with given average timings."""
    return make_successful_result
