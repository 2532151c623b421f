# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exact elapsed-time values and the shared sweep baseline."""

import math
import time

from pydantic import BaseModel, ConfigDict, Field

from dnnbench.common.constants import NANOS_PER_MILLIS, NANOS_PER_SECOND

__all__ = [
    "Baseline",
    "Duration",
    "decode_milliseconds",
]


class Duration(BaseModel):
    """Elapsed time as whole seconds plus a nanosecond remainder."""

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(ge=0)
    nanos: int = Field(ge=0, lt=NANOS_PER_SECOND)

    @classmethod
    def from_nanos(cls, total_nanos: int) -> "Duration":
        seconds, nanos = divmod(total_nanos, NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def total_seconds(self) -> float:
        """Fractional seconds, as written to the result tables."""
        return self.seconds + self.nanos / NANOS_PER_SECOND

    def __lt__(self, other: "Duration") -> bool:
        return self.total_nanos < other.total_nanos

    def __le__(self, other: "Duration") -> bool:
        return self.total_nanos <= other.total_nanos


def decode_milliseconds(value: float) -> Duration:
    """Convert a positive millisecond reading into an exact Duration.

    The value is rounded to the nearest nanosecond, so decimal inputs such as
    ``12.5`` decode to exactly 12,500,000 ns.

    Raises:
        ValueError: If value is not strictly positive or not finite. Callers
            must reject such readings before decoding.
    """
    if not value > 0:
        raise ValueError(f"Duration in milliseconds must be positive, got {value}")
    if not math.isfinite(value):
        raise ValueError(f"Duration in milliseconds must be finite, got {value}")
    return Duration.from_nanos(round(value * NANOS_PER_MILLIS))


class Baseline:
    """Monotonic start instant shared by every job of a sweep.

    Captured once before the first job and passed to each job, so event
    timestamps from different jobs lie on one timeline.
    """

    __slots__ = ("_start_ns",)

    def __init__(self, start_ns: int) -> None:
        self._start_ns = start_ns

    @classmethod
    def capture(cls) -> "Baseline":
        return cls(time.perf_counter_ns())

    @property
    def start_ns(self) -> int:
        return self._start_ns

    def elapsed(self) -> Duration:
        """Time since the baseline was captured."""
        return Duration.from_nanos(max(time.perf_counter_ns() - self._start_ns, 0))

    def __repr__(self) -> str:
        return f"Baseline(start_ns={self._start_ns})"
