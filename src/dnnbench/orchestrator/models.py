# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for benchmark sweeps."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dnnbench.common.exceptions import RunErrorType
from dnnbench.timings.events import BenchmarkEvent


class RunConfig(BaseModel):
    """One point of the configuration space.

    Attributes:
        container: Container image that runs the benchmark
        net: Network definition passed to the container
        batch_size: Batch size passed to the container
        gpu: Index of the GPU the container may use
    """

    model_config = ConfigDict(frozen=True)

    container: Annotated[str, Field(min_length=1)]
    net: Annotated[str, Field(min_length=1)]
    batch_size: Annotated[int, Field(ge=1)]
    gpu: Annotated[int, Field(ge=0)]


class RunResult(BaseModel):
    """Result from executing a single benchmark run.

    Exactly one of ``events`` and ``error`` is set.

    Attributes:
        label: Label identifying this run
        config: Configuration that was run
        events: Timing events in the order they were read, for successful runs
        error: Error message if run failed
        error_type: Category of the failure, if run failed
        returncode: Exit code of the benchmark process, if it exited normally
    """

    model_config = ConfigDict(frozen=True)

    label: str
    config: RunConfig
    events: tuple[BenchmarkEvent, ...] | None = None
    error: str | None = None
    error_type: RunErrorType | None = None
    returncode: int | None = None

    @model_validator(mode="after")
    def validate_outcome(self) -> "RunResult":
        if (self.events is None) == (self.error is None):
            raise ValueError("RunResult requires exactly one of events or error")
        if self.error is None and self.error_type is not None:
            raise ValueError("error_type is only valid for failed runs")
        return self

    @property
    def success(self) -> bool:
        return self.error is None
