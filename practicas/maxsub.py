"""Maximum contiguous subsequence sum, in quadratic and linear time."""

from __future__ import annotations

from typing import Sequence


def max_subsequence_sum_quadratic(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, or 0 if every sum is negative."""
    best = 0
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            if running > best:
                best = running
    return best


def max_subsequence_sum_linear(values: Sequence[int]) -> int:
    """Same result as the quadratic version in a single pass."""
    best = 0
    running = 0
    for value in values:
        running += value
        if running > best:
            best = running
        elif running < 0:
            running = 0
    return best