# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for dnnbench.

All settings use the ``DNNBENCH_`` prefix and are grouped by subsystem:
``DNNBENCH_{SUBSYSTEM}_{SETTING_NAME}``.

Examples:
    export DNNBENCH_RUNNER_LAUNCHER="sudo nvidia-docker"
    export DNNBENCH_RUNNER_GPU_ENV_VAR=CUDA_VISIBLE_DEVICES
    export DNNBENCH_LOGGING_LEVEL=DEBUG
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]


class _RunnerSettings(BaseSettings):
    """Settings for launching benchmark containers."""

    model_config = SettingsConfigDict(env_prefix="DNNBENCH_RUNNER_")

    LAUNCHER: str = Field(
        default="nvidia-docker",
        min_length=1,
        description="Container launcher command. Split with shell rules, so a "
        "prefix such as 'sudo nvidia-docker' is accepted.",
    )
    GPU_ENV_VAR: str = Field(
        default="NV_GPU",
        min_length=1,
        description="Environment variable used to pass the GPU index to the launcher.",
    )


class _LoggingSettings(BaseSettings):
    """Settings for console logging."""

    model_config = SettingsConfigDict(env_prefix="DNNBENCH_LOGGING_")

    LEVEL: str = Field(
        default="INFO",
        description="Default log level when --log-level is not given.",
    )


class _Environment:
    """Namespace of all settings subsystems, loaded once at import time."""

    def __init__(self) -> None:
        self.RUNNER = _RunnerSettings()
        self.LOGGING = _LoggingSettings()


Environment = _Environment()
