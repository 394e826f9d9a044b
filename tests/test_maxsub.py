import random

import pytest

from practicas.maxsub import (
    max_subsequence_sum_linear,
    max_subsequence_sum_quadratic,
)

SAMPLES = [
    [-9, 2, -5, -4, 6],
    [4, 0, 9, 2, 5],
    [-2, -1, -9, -7, -1],
    [9, -2, 1, -7, -8],
    [15, -2, -5, -4, 16],
    [7, -5, 6, 7, -7],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_both_versions_agree_on_samples(values):
    assert max_subsequence_sum_quadratic(values) == max_subsequence_sum_linear(values)


@pytest.mark.parametrize(
    "func", [max_subsequence_sum_quadratic, max_subsequence_sum_linear]
)
def test_pinned_samples(func):
    assert func([-9, 2, -5, -4, 6]) == 6
    assert func([15, -2, -5, -4, 16]) == 20
    assert func([7, -5, 6, 7, -7]) == 15


@pytest.mark.parametrize(
    "func", [max_subsequence_sum_quadratic, max_subsequence_sum_linear]
)
def test_all_non_negative_is_total(func):
    values = [4, 0, 9, 2, 5]
    assert func(values) == sum(values)


@pytest.mark.parametrize(
    "func", [max_subsequence_sum_quadratic, max_subsequence_sum_linear]
)
def test_all_negative_and_empty_give_zero(func):
    assert func([-2, -1, -9, -7, -1]) == 0
    assert func([]) == 0


def test_agree_on_random_vectors():
    rng = random.Random(5)
    for _ in range(50):
        values = [rng.randint(-9, 9) for _ in range(9)]
        assert max_subsequence_sum_quadratic(values) == max_subsequence_sum_linear(
            values
        )


def test_result_bounds():
    rng = random.Random(9)
    values = [rng.randint(-20, 20) for _ in range(40)]
    result = max_subsequence_sum_linear(values)
    assert result >= max(0, max(values))
    assert result <= sum(v for v in values if v > 0)