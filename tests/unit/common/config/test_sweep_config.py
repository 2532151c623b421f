# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for SweepConfig."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dnnbench.common.config import SweepConfig, SweepDefaults


class TestSweepConfig:
    """Tests for SweepConfig parsing and validation."""

    def test_defaults_match_reference_sweep(self):
        config = SweepConfig()

        assert config.containers == ["benchmark-caffe", "benchmark-cct"]
        assert config.gpus == [0, 1]
        assert config.nets == ["alexnet", "cifar10_quick"]
        assert config.batch_sizes == list(SweepDefaults.BATCH_SIZES)
        assert config.shuffle is True
        assert config.random_seed is None
        assert config.output_dir == Path(".")
        assert config.num_configurations == 2 * 2 * 2 * 17

    def test_comma_separated_strings(self):
        config = SweepConfig(
            containers="benchmark-caffe, benchmark-cct",
            gpus="0,1",
            nets="alexnet",
            batch_sizes="1, 2,4",
        )

        assert config.containers == ["benchmark-caffe", "benchmark-cct"]
        assert config.gpus == [0, 1]
        assert config.nets == ["alexnet"]
        assert config.batch_sizes == [1, 2, 4]

    def test_single_int(self):
        assert SweepConfig(gpus=3).gpus == [3]

    def test_invalid_integer(self):
        with pytest.raises(ValidationError, match="Invalid integer value: 'two'"):
            SweepConfig(batch_sizes="1,two")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"batch_sizes": "0"},
            {"gpus": "-1"},
            {"nets": ""},
            {"containers": []},
            {"cooldown_seconds": -1},
            {"nets": "alexnet,alexnet"},
            {"batch_sizes": [4, 4]},
        ],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            SweepConfig(**kwargs)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            SweepConfig(concurrency=10)
