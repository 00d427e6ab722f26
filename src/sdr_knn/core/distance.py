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

"""Distance metrics between two equal-length feature vectors."""

from __future__ import annotations

import numbers
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError, LengthMismatchError

DistanceFn = Callable[[Sequence[float], Sequence[float]], float]


def _validate_pair(
    first: Optional[Sequence[float]],
    second: Optional[Sequence[float]],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return ``first`` and ``second`` as float arrays after checking the contract.

    :param first: Feature vector taken from the testing data.
    :param second: Feature vector taken from the training data.
    :returns: Tuple of one-dimensional ``float64`` arrays.
    :raises InvalidArgumentError: If either vector is ``None``.
    :raises LengthMismatchError: If the vectors differ in length.
    """

    if first is None or second is None:
        raise InvalidArgumentError("Both feature vectors must be provided.")
    left = np.asarray(first, dtype=np.float64)
    right = np.asarray(second, dtype=np.float64)
    if left.ndim != 1 or right.ndim != 1:
        raise InvalidArgumentError("Feature vectors must be one-dimensional.")
    if left.shape[0] != right.shape[0]:
        raise LengthMismatchError(
            f"Feature vectors must have the same length (got {left.shape[0]} and {right.shape[0]})."
        )
    return left, right


def _scaled_norm(diff: np.ndarray, p: int) -> float:
    """
    Return the ``p``-norm of ``diff`` computed on differences scaled by their largest magnitude.

    Scaling keeps every term in ``[0, 1]`` so the power never overflows or
    underflows for finite inputs.
    """

    magnitudes = np.abs(diff)
    largest = float(np.max(magnitudes)) if magnitudes.size else 0.0
    if largest == 0.0:
        return 0.0
    return largest * float(np.sum((magnitudes / largest) ** p)) ** (1.0 / p)


def euclidean(first: Sequence[float], second: Sequence[float]) -> float:
    """
    Return the Euclidean (L2) distance between two feature vectors.

    :param first: Feature vector taken from the testing data.
    :param second: Feature vector taken from the training data.
    :returns: ``sqrt(sum((a_i - b_i) ** 2))``.
    """

    left, right = _validate_pair(first, second)
    return _scaled_norm(left - right, 2)


def manhattan(first: Sequence[float], second: Sequence[float]) -> float:
    """
    Return the Manhattan (L1) distance between two feature vectors.

    :param first: Feature vector taken from the testing data.
    :param second: Feature vector taken from the training data.
    :returns: ``sum(|a_i - b_i|)``.
    """

    left, right = _validate_pair(first, second)
    return float(np.sum(np.abs(left - right)))


def minkowski(first: Sequence[float], second: Sequence[float], p: int) -> float:
    """
    Return the Minkowski distance of order ``p`` between two feature vectors.

    ``p=1`` matches :func:`manhattan` and ``p=2`` matches :func:`euclidean`;
    prefer the dedicated helpers for those orders.

    :param first: Feature vector taken from the testing data.
    :param second: Feature vector taken from the training data.
    :param p: Positive integer order of the norm.
    :returns: ``sum(|a_i - b_i| ** p) ** (1 / p)``.
    :raises InvalidArgumentError: If ``p`` is not a positive integer.
    """

    if isinstance(p, bool) or not isinstance(p, numbers.Integral) or p < 1:
        raise InvalidArgumentError(f"Minkowski order must be a positive integer (got {p!r}).")
    left, right = _validate_pair(first, second)
    return _scaled_norm(left - right, int(p))


_NAMED_METRICS: Dict[str, DistanceFn] = {
    "euclidean": euclidean,
    "l2": euclidean,
    "manhattan": manhattan,
    "l1": manhattan,
}


def get_distance(name: str) -> DistanceFn:
    """
    Resolve a two-argument distance function by name.

    :param name: Metric name (``euclidean``/``l2`` or ``manhattan``/``l1``).
    :returns: Matching distance callable.
    :raises InvalidArgumentError: If the metric is unknown.
    """

    key = (name or "").strip().lower()
    try:
        return _NAMED_METRICS[key]
    except KeyError as exc:
        known = ", ".join(sorted(_NAMED_METRICS))
        raise InvalidArgumentError(f"Unknown distance metric '{name}'. Expected one of: {known}.") from exc


__all__ = ["DistanceFn", "euclidean", "get_distance", "manhattan", "minkowski"]
