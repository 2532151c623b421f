# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for dnnbench."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError

from dnnbench import __version__
from dnnbench.common.config import SweepConfig, SweepDefaults

app = App(
    name="dnnbench",
    help="Sweep containerized deep learning benchmarks across nets, batch sizes and GPUs.",
    version=__version__,
)


def _join(values: tuple) -> str:
    return ",".join(str(v) for v in values)


@app.default
def sweep(
    *,
    containers: Annotated[
        str, Parameter(help="Comma-separated container images.")
    ] = _join(SweepDefaults.CONTAINERS),
    gpus: Annotated[
        str, Parameter(help="Comma-separated GPU indices.")
    ] = _join(SweepDefaults.GPUS),
    nets: Annotated[
        str, Parameter(help="Comma-separated network definitions.")
    ] = _join(SweepDefaults.NETS),
    batch_sizes: Annotated[
        str, Parameter(help="Comma-separated batch sizes.")
    ] = _join(SweepDefaults.BATCH_SIZES),
    shuffle: Annotated[
        bool, Parameter(help="Evaluate configurations in a random order.")
    ] = SweepDefaults.SHUFFLE,
    random_seed: Annotated[
        int | None, Parameter(help="Seed for the evaluation order.")
    ] = SweepDefaults.RANDOM_SEED,
    cooldown_seconds: Annotated[
        float, Parameter(help="Pause between consecutive runs, in seconds.")
    ] = SweepDefaults.COOLDOWN_SECONDS,
    output_dir: Annotated[
        Path, Parameter(help="Directory for failed.csv, valid.csv and events.json.")
    ] = SweepDefaults.OUTPUT_DIR,
    export_events: Annotated[
        bool, Parameter(help="Write the per-run event timeline to events.json.")
    ] = SweepDefaults.EXPORT_EVENTS,
    log_level: Annotated[
        str | None, Parameter(help="Log level. Defaults to DNNBENCH_LOGGING_LEVEL.")
    ] = None,
) -> None:
    """Run every combination of containers, GPUs, nets and batch sizes once."""
    from dnnbench.cli_runner import run_sweep

    try:
        config = SweepConfig(
            containers=containers,
            gpus=gpus,
            nets=nets,
            batch_sizes=batch_sizes,
            shuffle=shuffle,
            random_seed=random_seed,
            cooldown_seconds=cooldown_seconds,
            output_dir=output_dir,
            export_events=export_events,
        )
    except ValidationError as e:
        raise SystemExit(f"Invalid sweep configuration:\n{e}") from e

    run_sweep(config, log_level=log_level)


def main() -> None:
    app()
