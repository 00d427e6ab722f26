"""Unit tests for :mod:`sdr_knn.core.distance`."""

from __future__ import annotations

import math

import numpy as np
import pytest

from sdr_knn.core.distance import euclidean, get_distance, manhattan, minkowski
from sdr_knn.errors import InvalidArgumentError, LengthMismatchError

pytestmark = pytest.mark.knn


def _random_vectors(count: int, size: int, seed: int = 7) -> list[list[float]]:
    rng = np.random.default_rng(seed)
    return rng.normal(size=(count, size)).tolist()


def test_euclidean_matches_hand_computed_value() -> None:
    assert euclidean([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_manhattan_matches_hand_computed_value() -> None:
    assert manhattan([1.0, -2.0, 3.0], [4.0, 2.0, 3.0]) == pytest.approx(7.0)


def test_minkowski_order_three() -> None:
    expected = (1.0 + 8.0) ** (1.0 / 3.0)
    assert minkowski([0.0, 0.0], [1.0, 2.0], 3) == pytest.approx(expected)


def test_euclidean_is_symmetric_and_zero_on_identity() -> None:
    first, second = _random_vectors(2, 16)
    assert euclidean(first, second) == pytest.approx(euclidean(second, first))
    assert euclidean(first, first) == 0.0


def test_euclidean_satisfies_triangle_inequality() -> None:
    vectors = _random_vectors(30, 8, seed=11)
    for a, b, c in zip(vectors[0::3], vectors[1::3], vectors[2::3]):
        assert euclidean(a, c) <= euclidean(a, b) + euclidean(b, c) + 1e-9


def test_minkowski_reduces_to_manhattan_and_euclidean() -> None:
    for first, second in zip(*[iter(_random_vectors(20, 5, seed=3))] * 2):
        assert minkowski(first, second, 1) == pytest.approx(manhattan(first, second))
        assert minkowski(first, second, 2) == pytest.approx(euclidean(first, second))


@pytest.mark.parametrize("metric", [euclidean, manhattan, lambda a, b: minkowski(a, b, 3)])
def test_distances_reject_length_mismatch(metric) -> None:
    with pytest.raises(LengthMismatchError):
        metric([1.0, 2.0], [1.0, 2.0, 3.0])


@pytest.mark.parametrize("metric", [euclidean, manhattan, lambda a, b: minkowski(a, b, 2)])
def test_distances_reject_missing_vectors(metric) -> None:
    with pytest.raises(InvalidArgumentError):
        metric(None, [1.0])
    with pytest.raises(InvalidArgumentError):
        metric([1.0], None)


@pytest.mark.parametrize("order", [0, -1, 1.5, True])
def test_minkowski_rejects_invalid_order(order) -> None:
    with pytest.raises(InvalidArgumentError):
        minkowski([0.0], [1.0], order)


def test_distances_are_non_negative_floats() -> None:
    first, second = _random_vectors(2, 4, seed=5)
    for value in (euclidean(first, second), manhattan(first, second), minkowski(first, second, 4)):
        assert isinstance(value, float)
        assert value >= 0.0 and math.isfinite(value)


def test_get_distance_resolves_aliases() -> None:
    assert get_distance("L2") is euclidean
    assert get_distance("manhattan") is manhattan
    with pytest.raises(InvalidArgumentError):
        get_distance("cosine")


def test_minkowski_high_order_stays_finite() -> None:
    assert minkowski([0.0], [10.0], 400) == pytest.approx(10.0)
    assert minkowski([0.0], [0.1], 400) == pytest.approx(0.1)
    assert minkowski([0.0, 0.0], [3.0, 4.0], 400) == pytest.approx(4.0)


@pytest.mark.parametrize("scale", [1e200, 1e-200])
def test_distances_stay_finite_at_extreme_magnitudes(scale: float) -> None:
    first, second = [0.0, 0.0], [3.0 * scale, 4.0 * scale]
    for value, expected in (
        (euclidean(first, second), 5.0 * scale),
        (minkowski(first, second, 2), 5.0 * scale),
        (minkowski(first, second, 3), (27.0 + 64.0) ** (1.0 / 3.0) * scale),
    ):
        assert math.isfinite(value) and value > 0.0
        assert value == pytest.approx(expected, rel=1e-12)
