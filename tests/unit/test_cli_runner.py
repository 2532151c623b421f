# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for cli_runner.py"""

import csv
import shlex
from unittest.mock import patch

import pytest

from dnnbench.common.config import SweepConfig
from dnnbench.common.environment import Environment
from dnnbench.common.exceptions import RunErrorType
from dnnbench.orchestrator.models import RunResult


class TestRunSweep:
    """Tests for run_sweep."""

    @pytest.fixture
    def sweep_config(self, tmp_path) -> SweepConfig:
        return SweepConfig(
            containers="benchmark-caffe",
            gpus="0",
            nets="alexnet",
            batch_sizes="1,2",
            output_dir=tmp_path,
        )

    def test_writes_result_files(self, sweep_config, tmp_path, run_config, result_factory):
        from dnnbench.cli_runner import run_sweep

        results = [
            result_factory(run_config),
            RunResult(
                label="0002",
                config=run_config.model_copy(update={"batch_size": 2}),
                error="child process terminated with non-zero exit code 1",
                error_type=RunErrorType.NON_ZERO_EXIT,
                returncode=1,
            ),
        ]

        with patch(
            "dnnbench.orchestrator.SweepOrchestrator.execute", return_value=results
        ) as mock_execute:
            returned = run_sweep(sweep_config)

        assert returned == results
        mock_execute.assert_called_once()
        assert (tmp_path / "failed.csv").exists()
        assert (tmp_path / "valid.csv").exists()
        assert (tmp_path / "events.json").exists()
        with open(tmp_path / "failed.csv", newline="") as f:
            assert len(list(csv.reader(f))) == 2

    def test_events_export_can_be_disabled(self, sweep_config, tmp_path, result_factory, run_config):
        from dnnbench.cli_runner import run_sweep

        config = sweep_config.model_copy(update={"export_events": False})

        with patch(
            "dnnbench.orchestrator.SweepOrchestrator.execute",
            return_value=[result_factory(run_config)],
        ):
            run_sweep(config)

        assert (tmp_path / "valid.csv").exists()
        assert not (tmp_path / "events.json").exists()

    def test_missing_aggregate_exits_after_writing_failed_runs(
        self, sweep_config, tmp_path, run_config
    ):
        """Test that tabulation faults exit non-zero but keep failed.csv."""
        from dnnbench.cli_runner import run_sweep

        results = [RunResult(label="0001", config=run_config, events=())]

        with patch(
            "dnnbench.orchestrator.SweepOrchestrator.execute", return_value=results
        ):
            with pytest.raises(SystemExit) as exc_info:
                run_sweep(sweep_config)

        assert exc_info.value.code == 1
        assert (tmp_path / "failed.csv").exists()
        assert not (tmp_path / "valid.csv").exists()

    def test_end_to_end_with_fake_launcher(self, sweep_config, tmp_path, fake_launcher):
        """Test a real sweep through the scripted launcher."""
        from dnnbench.cli_runner import run_sweep

        config = sweep_config.model_copy(update={"containers": ["ok", "crash"]})

        with (
            patch.object(Environment.RUNNER, "LAUNCHER", shlex.join(fake_launcher)),
            patch.object(Environment.RUNNER, "GPU_ENV_VAR", "NV_GPU"),
        ):
            results = run_sweep(config)

        assert len(results) == 4
        with open(tmp_path / "valid.csv", newline="") as f:
            assert len(list(csv.reader(f))) == 3
        with open(tmp_path / "failed.csv", newline="") as f:
            assert len(list(csv.reader(f))) == 3
