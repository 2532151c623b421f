# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Per-run average timings for result tables."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from dnnbench.common.exceptions import DuplicateAggregateError, MissingAggregateError
from dnnbench.orchestrator.models import RunResult
from dnnbench.timings.events import (
    AverageBackward,
    AverageForward,
    AverageForwardBackward,
    BenchmarkEvent,
)

__all__ = [
    "AverageTimings",
    "summarize_averages",
]


class AverageTimings(BaseModel):
    """Average pass times of one run, in fractional seconds.

    Attributes:
        forward: Average forward-pass time
        backward: Average backward-pass time
        total: Average combined forward+backward time
    """

    model_config = ConfigDict(frozen=True)

    forward: float
    backward: float
    total: float


def _single(
    events: Iterable[BenchmarkEvent], event_type: type, label: str
) -> BenchmarkEvent:
    matches = [e for e in events if isinstance(e, event_type)]
    if not matches:
        raise MissingAggregateError(label, event_type.__name__)
    if len(matches) > 1:
        raise DuplicateAggregateError(label, event_type.__name__, len(matches))
    return matches[0]


def summarize_averages(result: RunResult) -> AverageTimings:
    """Extract the three average timings of a successful run.

    Args:
        result: A successful RunResult

    Returns:
        AverageTimings with durations converted to seconds

    Raises:
        ValueError: If the run failed
        MissingAggregateError: If any average event is absent
        DuplicateAggregateError: If any average event appears more than once
    """
    if not result.success:
        raise ValueError(f"Cannot summarize failed run {result.label}")

    events = result.events
    return AverageTimings(
        forward=_single(events, AverageForward, result.label).duration.total_seconds(),
        backward=_single(
            events, AverageBackward, result.label
        ).duration.total_seconds(),
        total=_single(
            events, AverageForwardBackward, result.label
        ).duration.total_seconds(),
    )
