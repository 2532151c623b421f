# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Extraction of timing events from Caffe-style benchmark log lines.

Each recognized line format has its own matcher that returns an event or None.
``extract`` applies every matcher to a line, so a line can in principle yield
more than one event.

Recognized formats:
    Iteration: <int> forward-backward time: <ms> ms.   -> IterationStep
    <layer> forward: <ms> ms.                          -> LayerForward
    <layer> backward: <ms> ms.                         -> LayerBackward
    Average Forward pass: <ms> ms.                     -> AverageForward
    Average Backward pass: <ms> ms.                    -> AverageBackward
    Average Forward-Backward: <ms> ms.                 -> AverageForwardBackward
"""

import logging
import math
import re
from collections.abc import Callable

from dnnbench.common.exceptions import MalformedMeasurementError
from dnnbench.timings.duration import Baseline, Duration, decode_milliseconds
from dnnbench.timings.events import (
    AverageBackward,
    AverageForward,
    AverageForwardBackward,
    BenchmarkEvent,
    IterationStep,
    LayerBackward,
    LayerForward,
)

logger = logging.getLogger(__name__)

__all__ = [
    "MATCHERS",
    "extract",
    "match_average_backward",
    "match_average_forward",
    "match_average_forward_backward",
    "match_iteration_step",
    "match_layer_backward",
    "match_layer_forward",
]

_TIME = r"(?P<time>\d*[.]\d*) ms[.]"

ITERATION_STEP_PATTERN = re.compile(
    r"Iteration: (?P<iter>\d+) forward-backward time: " + _TIME
)
LAYER_FORWARD_PATTERN = re.compile(r"(?P<layer>[A-Za-z0-9]+)\s+forward: " + _TIME)
LAYER_BACKWARD_PATTERN = re.compile(r"(?P<layer>[A-Za-z0-9]+)\s+backward: " + _TIME)
AVERAGE_FORWARD_PATTERN = re.compile(r"Average Forward pass: " + _TIME)
AVERAGE_BACKWARD_PATTERN = re.compile(r"Average Backward pass: " + _TIME)
AVERAGE_FORWARD_BACKWARD_PATTERN = re.compile(r"Average Forward-Backward: " + _TIME)


def _parse_duration(line: str, match: re.Match) -> Duration:
    """Decode the ``time`` group of a match.

    Raises:
        MalformedMeasurementError: If the value is not a finite positive decimal
            or rounds down to zero nanoseconds
    """
    raw = match.group("time")
    try:
        value = float(raw)
    except ValueError as err:
        raise MalformedMeasurementError(line, f"'{raw}' is not a decimal") from err
    if not math.isfinite(value):
        raise MalformedMeasurementError(line, f"'{raw}' is out of range")
    if not value > 0:
        raise MalformedMeasurementError(line, f"'{raw}' is not a positive duration")
    duration = decode_milliseconds(value)
    if duration.total_nanos == 0:
        raise MalformedMeasurementError(line, f"'{raw}' is below 1 ns")
    return duration


def match_iteration_step(line: str, baseline: Baseline) -> IterationStep | None:
    match = ITERATION_STEP_PATTERN.search(line)
    if match is None:
        return None
    return IterationStep(
        timestamp=baseline.elapsed(),
        iteration=int(match.group("iter")),
        duration=_parse_duration(line, match),
    )


def match_layer_forward(line: str, baseline: Baseline) -> LayerForward | None:
    match = LAYER_FORWARD_PATTERN.search(line)
    if match is None:
        return None
    return LayerForward(
        timestamp=baseline.elapsed(),
        layer=match.group("layer"),
        duration=_parse_duration(line, match),
    )


def match_layer_backward(line: str, baseline: Baseline) -> LayerBackward | None:
    match = LAYER_BACKWARD_PATTERN.search(line)
    if match is None:
        return None
    return LayerBackward(
        timestamp=baseline.elapsed(),
        layer=match.group("layer"),
        duration=_parse_duration(line, match),
    )


def match_average_forward(line: str, baseline: Baseline) -> AverageForward | None:
    match = AVERAGE_FORWARD_PATTERN.search(line)
    if match is None:
        return None
    return AverageForward(
        timestamp=baseline.elapsed(), duration=_parse_duration(line, match)
    )


def match_average_backward(line: str, baseline: Baseline) -> AverageBackward | None:
    match = AVERAGE_BACKWARD_PATTERN.search(line)
    if match is None:
        return None
    return AverageBackward(
        timestamp=baseline.elapsed(), duration=_parse_duration(line, match)
    )


def match_average_forward_backward(
    line: str, baseline: Baseline
) -> AverageForwardBackward | None:
    match = AVERAGE_FORWARD_BACKWARD_PATTERN.search(line)
    if match is None:
        return None
    return AverageForwardBackward(
        timestamp=baseline.elapsed(), duration=_parse_duration(line, match)
    )


MATCHERS: tuple[Callable[[str, Baseline], BenchmarkEvent | None], ...] = (
    match_iteration_step,
    match_layer_forward,
    match_layer_backward,
    match_average_forward,
    match_average_backward,
    match_average_forward_backward,
)


def extract(line: str, baseline: Baseline) -> list[BenchmarkEvent]:
    """Return every event recognized in a single line of job output.

    Lines that match no format produce an empty list.

    Raises:
        MalformedMeasurementError: If a recognized line carries an invalid value
    """
    events = []
    for matcher in MATCHERS:
        event = matcher(line, baseline)
        if event is not None:
            logger.debug(f"Matched {event.kind}: {line.rstrip()!r}")
            events.append(event)
    return events
