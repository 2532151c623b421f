# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnnbench.common.config.config_defaults import SweepDefaults


def _split_csv(v: Any) -> Any:
    """Split a comma-separated CLI string into a list of stripped parts.

    Lists, tuples and None are returned unchanged so pydantic can validate them.
    """
    if isinstance(v, str):
        return [part.strip() for part in v.split(",") if part.strip()]
    if isinstance(v, tuple):
        return list(v)
    return v


class SweepConfig(BaseModel):
    """Configuration space and output settings for a benchmark sweep.

    The sweep covers the cartesian product of ``containers``, ``gpus``, ``nets``
    and ``batch_sizes``. Each list also accepts a comma-separated string, so
    ``--nets alexnet,cifar10_quick`` on the command line and
    ``nets=["alexnet", "cifar10_quick"]`` in code are equivalent.
    """

    model_config = ConfigDict(extra="forbid")

    containers: Annotated[
        list[str],
        Field(min_length=1, description="Container images to benchmark."),
    ] = list(SweepDefaults.CONTAINERS)

    gpus: Annotated[
        list[Annotated[int, Field(ge=0)]],
        Field(min_length=1, description="GPU indices to run on."),
    ] = list(SweepDefaults.GPUS)

    nets: Annotated[
        list[str],
        Field(min_length=1, description="Network definitions passed to the container."),
    ] = list(SweepDefaults.NETS)

    batch_sizes: Annotated[
        list[Annotated[int, Field(ge=1)]],
        Field(min_length=1, description="Batch sizes passed to the container."),
    ] = list(SweepDefaults.BATCH_SIZES)

    shuffle: Annotated[
        bool,
        Field(description="Evaluate configurations in a random order."),
    ] = SweepDefaults.SHUFFLE

    random_seed: Annotated[
        int | None,
        Field(description="Seed for the evaluation order. Random when unset."),
    ] = SweepDefaults.RANDOM_SEED

    cooldown_seconds: Annotated[
        float,
        Field(ge=0, description="Pause between consecutive runs."),
    ] = SweepDefaults.COOLDOWN_SECONDS

    output_dir: Annotated[
        Path,
        Field(description="Directory where result tables are written."),
    ] = SweepDefaults.OUTPUT_DIR

    export_events: Annotated[
        bool,
        Field(description="Also write the full event timeline of every successful run."),
    ] = SweepDefaults.EXPORT_EVENTS

    @field_validator("containers", "nets", mode="before")
    @classmethod
    def parse_name_list(cls, v: Any) -> Any:
        """Parse comma-separated names from CLI input."""
        return _split_csv(v)

    @field_validator("gpus", "batch_sizes", mode="before")
    @classmethod
    def parse_int_list(cls, v: Any) -> Any:
        """Parse comma-separated integers from CLI input.

        Raises:
            ValueError: If any part is not an integer
        """
        v = _split_csv(v)
        if isinstance(v, int):
            return [v]
        if isinstance(v, list):
            parsed = []
            for part in v:
                if isinstance(part, str):
                    try:
                        part = int(part)
                    except ValueError as err:
                        raise ValueError(
                            f"Invalid integer value: '{part}'. "
                            f"Provide a comma-separated list of integers, e.g. 1,2,4,8"
                        ) from err
                parsed.append(part)
            return parsed
        return v

    @field_validator("containers", "nets")
    @classmethod
    def validate_unique_names(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate values are not allowed: {v}")
        return v

    @field_validator("gpus", "batch_sizes")
    @classmethod
    def validate_unique_ints(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate values are not allowed: {v}")
        return v

    @property
    def num_configurations(self) -> int:
        """Size of the configuration space."""
        return (
            len(self.containers)
            * len(self.gpus)
            * len(self.nets)
            * len(self.batch_sizes)
        )
