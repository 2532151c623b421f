# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Timing events reported by a running benchmark job."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnnbench.timings.duration import Duration

__all__ = [
    "AverageBackward",
    "AverageForward",
    "AverageForwardBackward",
    "BenchmarkEvent",
    "IterationStep",
    "LayerBackward",
    "LayerForward",
]


class _TimingEvent(BaseModel):
    """Fields common to every event.

    Attributes:
        timestamp: Elapsed time since the sweep baseline when the line was read
        duration: Measured time reported by the job, always strictly positive
    """

    model_config = ConfigDict(frozen=True)

    timestamp: Duration
    duration: Duration

    @field_validator("duration")
    @classmethod
    def validate_positive_duration(cls, v: Duration) -> Duration:
        if v.total_nanos <= 0:
            raise ValueError("duration must be strictly positive")
        return v


class IterationStep(_TimingEvent):
    """One forward+backward pass of a training iteration."""

    kind: Literal["iteration_step"] = "iteration_step"
    iteration: int = Field(ge=0)


class LayerForward(_TimingEvent):
    """Forward-pass time of a named layer."""

    kind: Literal["layer_forward"] = "layer_forward"
    layer: str = Field(min_length=1)


class LayerBackward(_TimingEvent):
    """Backward-pass time of a named layer."""

    kind: Literal["layer_backward"] = "layer_backward"
    layer: str = Field(min_length=1)


class AverageForward(_TimingEvent):
    kind: Literal["average_forward"] = "average_forward"


class AverageBackward(_TimingEvent):
    kind: Literal["average_backward"] = "average_backward"


class AverageForwardBackward(_TimingEvent):
    kind: Literal["average_forward_backward"] = "average_forward_backward"


BenchmarkEvent = Annotated[
    IterationStep
    | LayerForward
    | LayerBackward
    | AverageForward
    | AverageBackward
    | AverageForwardBackward,
    Field(discriminator="kind"),
]
