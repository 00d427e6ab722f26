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

"""Distance metrics, classifier implementations and ``k`` selection."""

from __future__ import annotations

from .base import Classifier
from .classifier import KNNClassifier, NeighborCandidate, rank_neighbors, vote
from .distance import euclidean, get_distance, manhattan, minkowski
from .k_selection import parse_k_values, select_best_k

__all__ = [
    "Classifier",
    "KNNClassifier",
    "NeighborCandidate",
    "euclidean",
    "get_distance",
    "manhattan",
    "minkowski",
    "parse_k_values",
    "rank_neighbors",
    "select_best_k",
    "vote",
]
