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

"""K-nearest-neighbour classification over SDR-derived feature vectors.

Every test vector is compared against every training vector with the
Euclidean metric, neighbours are ranked with a stable sort (ties keep the
training order), and the label is resolved by majority vote.

Vote ties are resolved in favour of the label that first appears in the
training labels. The tally is pre-seeded with every training label in that
order, so the rule is deterministic but carries no meaning beyond it.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import (
    CardinalityMismatchError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidKError,
    LengthMismatchError,
)
from .base import Classifier
from .distance import euclidean

LOGGER = logging.getLogger("sdr_knn.classifier")

FeatureMatrix = Sequence[Sequence[float]]
LabelSequence = Sequence[Hashable]


@dataclass(frozen=True)
class NeighborCandidate:
    """
    Distance from one test vector to a single training vector.

    :ivar index: Position of the training vector in the training split.
    :vartype index: int
    :ivar distance: Euclidean distance to the test vector.
    :vartype distance: float
    """

    index: int
    distance: float


def freeze_matrix(rows: Optional[FeatureMatrix], *, name: str) -> np.ndarray:
    """
    Copy ``rows`` into a read-only two-dimensional ``float64`` array.

    :param rows: Feature vectors, one per row.
    :param name: Human-readable split name used in error messages.
    :returns: Array of shape ``(len(rows), dimensionality)``.
    :raises InvalidArgumentError: If ``rows`` or any row is ``None``, not a vector,
        or holds non-numeric values.
    :raises LengthMismatchError: If the rows do not share one dimensionality.
    """

    if rows is None:
        raise InvalidArgumentError(f"{name} must be provided.")
    rows = list(rows)
    width: Optional[int] = None
    for position, row in enumerate(rows):
        if row is None:
            raise InvalidArgumentError(f"{name}[{position}] is missing.")
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise InvalidArgumentError(
                f"{name}[{position}] must be a feature vector, got {type(row).__name__}."
            )
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise LengthMismatchError(
                f"{name}[{position}] has length {len(row)}; expected {width}."
            )
    if width is None:
        matrix = np.empty((0, 0), dtype=np.float64)
    else:
        try:
            matrix = np.array([list(row) for row in rows], dtype=np.float64).reshape(len(rows), width)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"{name} must contain only numeric values.") from exc
    matrix.setflags(write=False)
    return matrix


def validate_k(k: int, train_count: int) -> int:
    """
    Return ``k`` when it lies in ``[1, train_count]``.

    :param k: Requested neighbour count.
    :param train_count: Number of training vectors available.
    :returns: ``k`` as a plain ``int``.
    :raises InvalidKError: If ``k`` is not an integer in range.
    """

    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidKError(f"k must be an integer (got {k!r}).")
    if not 1 <= int(k) <= train_count:
        raise InvalidKError(f"k must satisfy 1 <= k <= {train_count} (got {k}).")
    return int(k)


def rank_neighbors(test_vector: Sequence[float], train_matrix: np.ndarray) -> List[NeighborCandidate]:
    """
    Rank every training vector by its distance to ``test_vector``.

    :param test_vector: Feature vector being classified.
    :param train_matrix: Training vectors, one per row.
    :returns: Candidates sorted by ascending distance, ties by ascending index.
    """

    distances = np.fromiter(
        (euclidean(test_vector, train_row) for train_row in train_matrix),
        dtype=np.float64,
        count=train_matrix.shape[0],
    )
    order = np.argsort(distances, kind="stable")
    return [NeighborCandidate(index=int(idx), distance=float(distances[idx])) for idx in order]


def vote(neighbors: Sequence[NeighborCandidate], train_labels: Sequence[Hashable], k: int) -> Hashable:
    """
    Return the majority label among the first ``k`` ``neighbors``.

    Every distinct training label is registered with zero votes before the
    neighbours are counted; ties go to the label registered first.

    :param neighbors: Ranked neighbour candidates.
    :param train_labels: Labels aligned with the training vectors.
    :param k: Number of leading neighbours allowed to vote.
    :returns: Winning label.
    """

    votes: Dict[Hashable, int] = dict.fromkeys(train_labels, 0)
    for neighbor in neighbors[:k]:
        votes[train_labels[neighbor.index]] += 1
    return max(votes, key=votes.__getitem__)


def _log_neighbors(
    neighbors: Sequence[NeighborCandidate],
    train_labels: Sequence[Hashable],
    k: int,
) -> None:
    LOGGER.debug("Nearest neighbours (index / euclidean distance / label)")
    for neighbor in neighbors[:k]:
        LOGGER.debug(
            "  %d : %.6f : %s",
            neighbor.index,
            neighbor.distance,
            train_labels[neighbor.index],
        )


class KNNClassifier(Classifier[FeatureMatrix, LabelSequence]):
    """Majority-vote KNN classifier using the Euclidean metric."""

    def classify(
        self,
        test_features: FeatureMatrix,
        train_features: FeatureMatrix,
        train_labels: LabelSequence,
        k: int,
    ) -> List[Hashable]:
        """
        Predict a label for every test vector.

        :param test_features: Feature vectors to classify.
        :param train_features: Labelled reference feature vectors.
        :param train_labels: Labels aligned with ``train_features``.
        :param k: Number of nearest neighbours consulted per test vector.
        :returns: Predicted labels in the order of ``test_features``.
        :raises CardinalityMismatchError: If features and labels differ in length.
        :raises InvalidKError: If ``k`` is outside ``[1, len(train_features)]``.
        :raises LengthMismatchError: If any vectors differ in dimensionality.
        :raises InvalidArgumentError: If any input is missing.
        """

        if train_labels is None:
            raise InvalidArgumentError("train_labels must be provided.")
        train_matrix = freeze_matrix(train_features, name="train_features")
        labels: Tuple[Hashable, ...] = tuple(train_labels)
        if train_matrix.shape[0] != len(labels):
            raise CardinalityMismatchError(
                f"Got {train_matrix.shape[0]} training vectors but {len(labels)} training labels."
            )
        k = validate_k(k, train_matrix.shape[0])
        test_matrix = freeze_matrix(test_features, name="test_features")
        if test_matrix.shape[0] and test_matrix.shape[1] != train_matrix.shape[1]:
            raise LengthMismatchError(
                f"Test vectors have {test_matrix.shape[1]} features; "
                f"training vectors have {train_matrix.shape[1]}."
            )

        LOGGER.debug(
            "Classifying %d vectors against %d training vectors (k=%d).",
            test_matrix.shape[0],
            train_matrix.shape[0],
            k,
        )
        predicted: List[Hashable] = []
        for test_vector in test_matrix:
            neighbors = rank_neighbors(test_vector, train_matrix)
            if LOGGER.isEnabledFor(logging.DEBUG):
                _log_neighbors(neighbors, labels, k)
            predicted.append(vote(neighbors, labels, k))
        return predicted

    def accuracy(self, predicted_labels: LabelSequence, actual_labels: LabelSequence) -> float:
        """
        Return the percentage of positions where prediction and truth agree.

        :param predicted_labels: Labels produced by :meth:`classify`.
        :param actual_labels: Ground-truth labels for the same test vectors.
        :returns: Accuracy in ``[0, 100]``.
        :raises CardinalityMismatchError: If the sequences differ in length.
        :raises EmptyInputError: If both sequences are empty.
        """

        if predicted_labels is None or actual_labels is None:
            raise InvalidArgumentError("Both label sequences must be provided.")
        if len(predicted_labels) != len(actual_labels):
            raise CardinalityMismatchError(
                f"Got {len(predicted_labels)} predicted labels but {len(actual_labels)} actual labels."
            )
        if len(predicted_labels) == 0:
            raise EmptyInputError("Accuracy is undefined for zero predictions.")
        correct = sum(1 for pred, gold in zip(predicted_labels, actual_labels) if pred == gold)
        return correct / len(predicted_labels) * 100.0


__all__ = [
    "KNNClassifier",
    "NeighborCandidate",
    "freeze_matrix",
    "rank_neighbors",
    "validate_k",
    "vote",
]
