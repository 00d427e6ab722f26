#!/usr/bin/env python
# Copyright 2025 The SDR KNN Contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Experiment result record and its on-disk artefacts."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from common.logging.utils import ensure_directory

LOGGER = logging.getLogger("sdr_knn.outputs")

METRICS_FILENAME = "metrics.json"
PREDICTIONS_FILENAME = "predictions.jsonl"


@dataclass
class ExperimentResult:  # pylint: disable=too-many-instance-attributes
    """
    Outcome of one classification experiment.

    :ivar experiment_id: Identifier of the experiment run.
    :ivar training_file_url: Location of the training dataset.
    :ivar testing_file_url: Location of the testing dataset.
    :ivar start_time_utc: UTC timestamp when the run started.
    :ivar end_time_utc: UTC timestamp when the run finished.
    :ivar duration_sec: Wall-clock duration in seconds.
    :ivar k: Neighbour count whose predictions are reported.
    :ivar predicted_labels: Predicted labels at ``k``.
    :ivar actual_labels: Ground-truth labels of the testing split.
    :ivar accuracy: Accuracy percentage at ``k``.
    :ivar accuracy_by_k: Accuracy percentage for every evaluated ``k``.
    :ivar output_folder_location: Directory holding written artefacts.
    :ivar output_table_location: Path of the per-vector predictions table.
    """

    experiment_id: str
    training_file_url: str
    testing_file_url: str
    start_time_utc: Optional[datetime] = None
    end_time_utc: Optional[datetime] = None
    duration_sec: Optional[float] = None
    k: Optional[int] = None
    predicted_labels: List[str] = field(default_factory=list)
    actual_labels: List[str] = field(default_factory=list)
    accuracy: Optional[float] = None
    accuracy_by_k: Dict[int, float] = field(default_factory=dict)
    output_folder_location: Optional[str] = None
    output_table_location: Optional[str] = None

    def to_metrics(self) -> Dict[str, Any]:
        """
        Return the JSON-serialisable summary written to ``metrics.json``.

        :returns: Mapping without the per-vector label lists.
        """

        return {
            "experiment_id": self.experiment_id,
            "training_file_url": self.training_file_url,
            "testing_file_url": self.testing_file_url,
            "start_time_utc": _isoformat(self.start_time_utc),
            "end_time_utc": _isoformat(self.end_time_utc),
            "duration_sec": self.duration_sec,
            "k": self.k,
            "accuracy": self.accuracy,
            "accuracy_by_k": {str(k): value for k, value in sorted(self.accuracy_by_k.items())},
            "n_test": len(self.predicted_labels),
            "output_folder_location": self.output_folder_location,
            "output_table_location": self.output_table_location,
        }


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _write_predictions(
    path: Path,
    predicted: Sequence[str],
    actual: Sequence[str],
) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        for idx, pred in enumerate(predicted):
            record: Mapping[str, Any] = {
                "index": idx,
                "predicted": pred,
                "actual": actual[idx] if idx < len(actual) else None,
                "correct": idx < len(actual) and pred == actual[idx],
            }
            handle.write(json.dumps(record, ensure_ascii=False) + "\n")


def write_experiment_result(
    result: ExperimentResult,
    out_dir: str | Path,
    *,
    overwrite: bool = False,
) -> Path:
    """
    Persist ``result`` as ``metrics.json`` plus ``predictions.jsonl``.

    The output locations are recorded on ``result`` before the metrics are
    written, so the file on disk references itself.

    :param result: Experiment outcome to persist.
    :param out_dir: Root output directory; a sub-directory per experiment is created.
    :param overwrite: Replace artefacts from a previous run with the same id.
    :returns: Path to the written ``metrics.json``.
    :raises FileExistsError: If artefacts exist and ``overwrite`` is ``False``.
    """

    experiment_dir = Path(out_dir) / result.experiment_id
    metrics_path = experiment_dir / METRICS_FILENAME
    predictions_path = experiment_dir / PREDICTIONS_FILENAME
    if metrics_path.exists() and not overwrite:
        raise FileExistsError(
            f"{metrics_path} already exists; pass --overwrite to replace it."
        )
    ensure_directory(experiment_dir)

    result.output_folder_location = str(experiment_dir)
    result.output_table_location = str(predictions_path)
    _write_predictions(predictions_path, result.predicted_labels, result.actual_labels)
    with open(metrics_path, "w", encoding="utf-8") as handle:
        json.dump(result.to_metrics(), handle, ensure_ascii=False, indent=2)
    LOGGER.info("Wrote experiment outputs to %s.", experiment_dir)
    return metrics_path


__all__ = ["ExperimentResult", "METRICS_FILENAME", "PREDICTIONS_FILENAME", "write_experiment_result"]
