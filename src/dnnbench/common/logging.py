# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Console logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from dnnbench.common.environment import Environment

_LOG_FORMAT = "%(message)s"
_DATE_FORMAT = "[%X]"


def setup_rich_logging(level: str | int | None = None) -> None:
    """Route all ``dnnbench`` loggers to a rich console handler on stderr.

    Args:
        level: Log level name or number. Falls back to DNNBENCH_LOGGING_LEVEL.
    """
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root_logger = logging.getLogger("dnnbench")
    # Replace handlers from any previous call so repeated setup does not duplicate output
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
