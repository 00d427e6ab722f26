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

"""K-nearest-neighbour classification of SDR-derived feature vectors.

Exposes the distance metrics, the majority-vote classifier, dataset loaders
and the experiment runner used by the command-line interface."""

from __future__ import annotations

from .core import (
    Classifier,
    KNNClassifier,
    NeighborCandidate,
    euclidean,
    manhattan,
    minkowski,
    parse_k_values,
    select_best_k,
)
from .data import DatasetLoader, DatasetSplit, JsonDatasetLoader, SequenceDataEntry, split_entries
from .errors import (
    CardinalityMismatchError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidKError,
    KNNError,
    LengthMismatchError,
)
from .experiment import ExperimentConfig, run_experiment
from .outputs import ExperimentResult, write_experiment_result

__all__ = [
    "CardinalityMismatchError",
    "Classifier",
    "DatasetLoader",
    "DatasetSplit",
    "EmptyInputError",
    "ExperimentConfig",
    "ExperimentResult",
    "InvalidArgumentError",
    "InvalidKError",
    "JsonDatasetLoader",
    "KNNClassifier",
    "KNNError",
    "LengthMismatchError",
    "NeighborCandidate",
    "SequenceDataEntry",
    "euclidean",
    "manhattan",
    "minkowski",
    "parse_k_values",
    "run_experiment",
    "select_best_k",
    "split_entries",
    "write_experiment_result",
]
