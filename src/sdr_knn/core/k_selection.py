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

"""Neighbourhood-size sweeps for the SDR experiment runner."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..errors import InvalidKError

K_SELECT_METHODS = ("max", "elbow")


def parse_k_values(k_default: int, sweep: str) -> List[int]:
    """
    Derive the sorted set of ``k`` values requested for evaluation.

    :param k_default: Primary ``k``; always part of the result.
    :param sweep: Comma-delimited string of additional ``k`` candidates.
    :returns: Distinct ``k`` values in ascending order.
    :raises InvalidKError: If any value is not a positive integer.
    """

    values = {int(k_default)}
    for token in (sweep or "").split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.add(int(token))
        except ValueError as exc:
            raise InvalidKError(f"Invalid k value '{token}' in sweep.") from exc
    invalid = sorted(k for k in values if k < 1)
    if invalid:
        raise InvalidKError(f"k values must be positive integers (got {invalid}).")
    return sorted(values)


def select_best_k(
    k_values: Sequence[int],
    accuracy_by_k: Mapping[int, float],
    *,
    method: str = "max",
) -> int:
    """
    Select ``k`` using either max-accuracy or an elbow heuristic.

    ``"max"`` returns the smallest ``k`` reaching the highest accuracy.
    ``"elbow"`` returns the first ``k`` whose marginal gain per extra
    neighbour falls to half the initial slope or below, and falls back to
    ``"max"`` when fewer than three values were evaluated.

    :param k_values: Sorted sequence of evaluated ``k`` values.
    :param accuracy_by_k: Accuracy percentage observed for each ``k``.
    :param method: ``"max"`` or ``"elbow"``.
    :returns: Selected ``k``.
    :raises ValueError: If ``k_values`` is empty or ``method`` is unknown.
    """

    if not k_values:
        raise ValueError("At least one k value is required.")
    method_norm = (method or "max").strip().lower()
    if method_norm not in K_SELECT_METHODS:
        raise ValueError(f"Unknown k selection method '{method}'.")

    def _best() -> int:
        return max(k_values, key=lambda k: accuracy_by_k.get(k, 0.0))

    if method_norm == "max" or len(k_values) <= 2:
        return _best()

    accuracies = [accuracy_by_k.get(k, 0.0) for k in k_values]
    slopes: List[float] = []
    for idx in range(1, len(k_values)):
        delta_k = k_values[idx] - k_values[idx - 1]
        slopes.append((accuracies[idx] - accuracies[idx - 1]) / delta_k if delta_k else 0.0)
    threshold = max(slopes[0] * 0.5, 0.001)
    for idx, slope in enumerate(slopes[1:], start=1):
        if slope <= threshold:
            return k_values[idx]
    return _best()


__all__ = ["K_SELECT_METHODS", "parse_k_values", "select_best_k"]
