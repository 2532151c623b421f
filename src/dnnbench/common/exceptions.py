# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for dnnbench."""

from enum import Enum

__all__ = [
    "BenchmarkRunError",
    "DnnBenchError",
    "DuplicateAggregateError",
    "LaunchError",
    "MalformedMeasurementError",
    "MissingAggregateError",
    "NonZeroExitError",
    "RunErrorType",
    "TabulationError",
    "UnexpectedTerminationError",
]


class RunErrorType(str, Enum):
    """Why a single benchmark job failed."""

    LAUNCH_FAILED = "launch_failed"
    UNEXPECTED_TERMINATION = "unexpected_termination"
    NON_ZERO_EXIT = "non_zero_exit"
    MALFORMED_MEASUREMENT = "malformed_measurement"


class DnnBenchError(Exception):
    """Base class for all dnnbench errors."""


class BenchmarkRunError(DnnBenchError):
    """A single benchmark job failed.

    The orchestrator records these as failed results and moves on to the next
    configuration.
    """

    error_type: RunErrorType


class LaunchError(BenchmarkRunError):
    """The benchmark process could not be started."""

    error_type = RunErrorType.LAUNCH_FAILED


class UnexpectedTerminationError(BenchmarkRunError):
    """The benchmark process ended without an exit status (e.g. killed by a signal)."""

    error_type = RunErrorType.UNEXPECTED_TERMINATION

    def __init__(self, signal_number: int | None = None) -> None:
        self.signal_number = signal_number
        message = "child process unexpectedly terminated"
        if signal_number is not None:
            message += f" (signal {signal_number})"
        super().__init__(message)


class NonZeroExitError(BenchmarkRunError):
    """The benchmark process ran to completion but reported failure."""

    error_type = RunErrorType.NON_ZERO_EXIT

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(
            f"child process terminated with non-zero exit code {returncode}"
        )


class MalformedMeasurementError(BenchmarkRunError):
    """A matched log line carried a value that is not a positive decimal."""

    error_type = RunErrorType.MALFORMED_MEASUREMENT

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"malformed measurement in line {line!r}: {reason}")


class TabulationError(DnnBenchError):
    """Results of a successful run could not be tabulated."""


class MissingAggregateError(TabulationError):
    """A successful run never reported one of the required average timings."""

    def __init__(self, label: str, kind: str) -> None:
        self.label = label
        self.kind = kind
        super().__init__(f"run {label} did not report a {kind} event")


class DuplicateAggregateError(TabulationError):
    """A successful run reported the same average timing more than once."""

    def __init__(self, label: str, kind: str, count: int) -> None:
        self.label = label
        self.kind = kind
        self.count = count
        super().__init__(
            f"run {label} reported {count} {kind} events, expected exactly one"
        )
