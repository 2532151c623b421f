# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for timing event extraction."""

import pytest

from dnnbench.common.exceptions import MalformedMeasurementError, RunErrorType
from dnnbench.timings.duration import Duration, decode_milliseconds
from dnnbench.timings.events import (
    AverageBackward,
    AverageForward,
    AverageForwardBackward,
    IterationStep,
    LayerBackward,
    LayerForward,
)
from dnnbench.timings.extractor import (
    extract,
    match_average_backward,
    match_average_forward,
    match_average_forward_backward,
    match_iteration_step,
    match_layer_backward,
    match_layer_forward,
)


class TestExtract:
    """Tests for extract."""

    def test_iteration_step(self, fixed_baseline):
        """Test that an iteration line yields exactly one IterationStep."""
        events = extract(
            "Iteration: 5 forward-backward time: 12.34 ms.", fixed_baseline
        )

        assert len(events) == 1
        event = events[0]
        assert isinstance(event, IterationStep)
        assert event.iteration == 5
        assert event.duration.total_seconds() == pytest.approx(0.01234)
        assert event.timestamp == Duration.from_nanos(fixed_baseline.elapsed_nanos)

    def test_average_forward_only(self, fixed_baseline):
        """Test that an average forward line yields no other variant."""
        events = extract("Average Forward pass: 3.2 ms.", fixed_baseline)

        assert len(events) == 1
        assert isinstance(events[0], AverageForward)
        assert events[0].duration == decode_milliseconds(3.2)

    @pytest.mark.parametrize(
        "line,event_type",
        [
            ("Average Backward pass: 4.5 ms.", AverageBackward),
            ("Average Forward-Backward: 7.7 ms.", AverageForwardBackward),
        ],
    )
    def test_average_lines(self, fixed_baseline, line, event_type):
        events = extract(line, fixed_baseline)

        assert [type(e) for e in events] == [event_type]

    @pytest.mark.parametrize(
        "line,event_type,layer",
        [
            ("conv1\tforward: 0.5 ms.", LayerForward, "conv1"),
            ("conv1   backward: 0.75 ms.", LayerBackward, "conv1"),
            ("fc8 forward: 1.25 ms.", LayerForward, "fc8"),
            ("relu2\tbackward: .5 ms.", LayerBackward, "relu2"),
        ],
    )
    def test_layer_lines(self, fixed_baseline, line, event_type, layer):
        events = extract(line, fixed_baseline)

        assert len(events) == 1
        assert isinstance(events[0], event_type)
        assert events[0].layer == layer

    def test_caffe_log_prefix_is_ignored(self, fixed_baseline):
        """Test that glog prefixes in front of a timing line do not prevent a match."""
        line = (
            "I0131 12:00:00.123456    17 caffe.cpp:412]     conv1\tforward: 2.5 ms.\n"
        )

        events = extract(line, fixed_baseline)

        assert len(events) == 1
        assert events[0].layer == "conv1"
        assert events[0].duration == decode_milliseconds(2.5)

    @pytest.mark.parametrize(
        "line",
        [
            "Net initialized.",
            "",
            "\n",
            "Average Forward pass: 3 ms.",
            "Iteration: x forward-backward time: 1.0 ms.",
            "Testing for 50 iterations.",
        ],
    )
    def test_unrecognized_lines_yield_nothing(self, fixed_baseline, line):
        assert extract(line, fixed_baseline) == []

    def test_line_matching_several_patterns_yields_several_events(
        self, fixed_baseline
    ):
        """Test that matchers are not treated as mutually exclusive."""
        line = "conv1 forward: 1.0 ms. conv1 backward: 2.0 ms."

        events = extract(line, fixed_baseline)

        assert [type(e) for e in events] == [LayerForward, LayerBackward]

    def test_timestamp_taken_per_event(self, fixed_baseline):
        """Test that the baseline is consulted at match time, not cached."""
        extract("Average Forward pass: 1.0 ms.", fixed_baseline)
        fixed_baseline.elapsed_nanos = 9_000_000_000

        events = extract("Average Backward pass: 1.0 ms.", fixed_baseline)

        assert events[0].timestamp == Duration(seconds=9, nanos=0)

    def test_unrecognized_line_does_not_read_clock(self, fixed_baseline):
        extract("Net initialized.", fixed_baseline)

        assert fixed_baseline.calls == 0

    @pytest.mark.parametrize(
        "line",
        [
            "Average Forward pass: . ms.",
            "Average Backward pass: 0.0 ms.",
            "Iteration: 3 forward-backward time: 0. ms.",
            "conv1 forward: 0.0000000001 ms.",
            "Average Forward pass: " + "9" * 400 + ". ms.",
        ],
    )
    def test_malformed_measurement_raises(self, fixed_baseline, line):
        """Test that bad numeric payloads are rejected rather than dropped."""
        with pytest.raises(MalformedMeasurementError) as exc_info:
            extract(line, fixed_baseline)

        assert exc_info.value.line == line
        assert exc_info.value.error_type == RunErrorType.MALFORMED_MEASUREMENT


class TestMatchers:
    """Tests for the individual line matchers."""

    @pytest.mark.parametrize(
        "matcher",
        [
            match_iteration_step,
            match_layer_forward,
            match_layer_backward,
            match_average_forward,
            match_average_backward,
            match_average_forward_backward,
        ],
    )
    def test_returns_none_for_unrelated_line(self, fixed_baseline, matcher):
        assert matcher("Net initialized.", fixed_baseline) is None

    def test_iteration_line_is_not_a_layer_line(self, fixed_baseline):
        line = "Iteration: 5 forward-backward time: 12.34 ms."

        assert match_layer_forward(line, fixed_baseline) is None
        assert match_layer_backward(line, fixed_baseline) is None

    def test_average_lines_are_not_layer_lines(self, fixed_baseline):
        assert match_layer_forward("Average Forward pass: 1.0 ms.", fixed_baseline) is None
        assert (
            match_layer_backward("Average Backward pass: 1.0 ms.", fixed_baseline)
            is None
        )

    def test_average_forward_backward_is_not_average_forward(self, fixed_baseline):
        line = "Average Forward-Backward: 3.0 ms."

        assert match_average_forward(line, fixed_baseline) is None
        assert isinstance(
            match_average_forward_backward(line, fixed_baseline),
            AverageForwardBackward,
        )
