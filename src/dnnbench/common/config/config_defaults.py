# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SweepDefaults:
    CONTAINERS = ("benchmark-caffe", "benchmark-cct")
    GPUS = (0, 1)
    NETS = ("alexnet", "cifar10_quick")
    BATCH_SIZES = (
        1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8096, 16384, 32768, 65536,
    )  # fmt: skip
    SHUFFLE = True
    RANDOM_SEED = None
    COOLDOWN_SECONDS = 0.0
    OUTPUT_DIR = Path(".")
    EXPORT_EVENTS = True
