# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for the full event timeline of successful runs."""

import orjson

from dnnbench.exporters.base_exporter import BaseExporter


class EventsJsonExporter(BaseExporter):
    """Exports every event of every successful run.

    Output structure:
    {
        "num_runs": 24,
        "num_successful_runs": 20,
        "runs": [
            {
                "label": "0001_benchmark-caffe_alexnet_b64_gpu0",
                "config": {"container": ..., "net": ..., "batch_size": 64, "gpu": 0},
                "events": [
                    {"kind": "iteration_step", "iteration": 1,
                     "timestamp": 1.52, "duration": 0.01234},
                    ...
                ]
            },
            ...
        ]
    }

    Timestamps and durations are written in fractional seconds.
    """

    def get_file_name(self) -> str:
        return "events.json"

    def _generate_content(self) -> str:
        runs = []
        for result in self._results:
            if not result.success:
                continue
            events = []
            for event in result.events:
                record = event.model_dump(mode="json", exclude={"timestamp", "duration"})
                record["timestamp"] = event.timestamp.total_seconds()
                record["duration"] = event.duration.total_seconds()
                events.append(record)
            runs.append(
                {
                    "label": result.label,
                    "config": result.config.model_dump(mode="json"),
                    "events": events,
                }
            )

        output = {
            "num_runs": len(self._results),
            "num_successful_runs": len(runs),
            "runs": runs,
        }
        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8")
