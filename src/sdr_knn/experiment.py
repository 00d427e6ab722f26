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

"""End-to-end SDR classification experiment: load, classify, score, time."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .core.base import Classifier
from .core.classifier import KNNClassifier, validate_k
from .core.k_selection import parse_k_values, select_best_k
from .data import DatasetLoader, DatasetSplit, JsonDatasetLoader, split_entries
from .outputs import ExperimentResult

LOGGER = logging.getLogger("sdr_knn.experiment")


@dataclass(frozen=True)
class ExperimentConfig:  # pylint: disable=too-many-instance-attributes
    """
    Settings for a single experiment run.

    :ivar experiment_id: Identifier used for logging and the output folder.
    :vartype experiment_id: str
    :ivar train_file: Dataset holding the labelled training vectors.
    :vartype train_file: str
    :ivar test_file: Dataset holding the testing vectors and their labels.
    :vartype test_file: str
    :ivar k: Primary neighbour count.
    :vartype k: int
    :ivar k_sweep: Comma-separated extra neighbour counts to evaluate.
    :vartype k_sweep: str
    :ivar k_select_method: ``max`` or ``elbow``; picks the reported ``k`` when sweeping.
    :vartype k_select_method: str
    :ivar out_dir: Root directory for artefacts; empty disables writing.
    :vartype out_dir: str
    :ivar overwrite: Replace artefacts from an earlier run with the same id.
    :vartype overwrite: bool
    """

    experiment_id: str
    train_file: str
    test_file: str
    k: int = 3
    k_sweep: str = ""
    k_select_method: str = "max"
    out_dir: str = ""
    overwrite: bool = False


def _load_split(loader: DatasetLoader, path: str) -> DatasetSplit:
    return split_entries(loader.load_dataset(path))


def run_experiment(
    config: ExperimentConfig,
    *,
    loader: Optional[DatasetLoader] = None,
    classifier: Optional[Classifier] = None,
) -> ExperimentResult:
    """
    Classify the testing split of ``config`` and score it against its labels.

    Every ``k`` in the sweep is validated against the training size before any
    classification runs. When more than one ``k`` is evaluated the reported
    predictions come from the ``k`` chosen by ``config.k_select_method``.

    :param config: Experiment settings.
    :param loader: Dataset loader; defaults to :class:`JsonDatasetLoader`.
    :param classifier: Classifier implementation; defaults to :class:`KNNClassifier`.
    :returns: Populated :class:`ExperimentResult` (not yet written to disk).
    """

    loader = loader or JsonDatasetLoader()
    classifier = classifier or KNNClassifier()
    start_time = datetime.now(timezone.utc)
    started = time.perf_counter()

    train = _load_split(loader, config.train_file)
    test = _load_split(loader, config.test_file)
    k_values = parse_k_values(config.k, config.k_sweep)
    for k in k_values:
        validate_k(k, len(train))

    LOGGER.info(
        "[%s] Classifying %d test vectors against %d training vectors; k=%s.",
        config.experiment_id,
        len(test),
        len(train),
        ",".join(str(k) for k in k_values),
    )
    predictions_by_k: Dict[int, List[str]] = {}
    accuracy_by_k: Dict[int, float] = {}
    for k in k_values:
        predicted = list(classifier.classify(test.features, train.features, train.labels, k))
        predictions_by_k[k] = predicted
        accuracy_by_k[k] = classifier.accuracy(predicted, test.labels)
        LOGGER.info("[%s] k=%d accuracy=%.2f%%", config.experiment_id, k, accuracy_by_k[k])

    if len(k_values) > 1:
        best_k = select_best_k(k_values, accuracy_by_k, method=config.k_select_method)
    else:
        best_k = k_values[0]

    result = ExperimentResult(
        experiment_id=config.experiment_id,
        training_file_url=str(config.train_file),
        testing_file_url=str(config.test_file),
        start_time_utc=start_time,
        end_time_utc=datetime.now(timezone.utc),
        duration_sec=time.perf_counter() - started,
        k=best_k,
        predicted_labels=predictions_by_k[best_k],
        actual_labels=list(test.labels),
        accuracy=accuracy_by_k[best_k],
        accuracy_by_k=accuracy_by_k,
    )
    LOGGER.info(
        "[%s] Finished in %.3fs; reporting k=%d with accuracy %.2f%%.",
        config.experiment_id,
        result.duration_sec,
        best_k,
        result.accuracy,
    )
    return result


__all__ = ["ExperimentConfig", "run_experiment"]
