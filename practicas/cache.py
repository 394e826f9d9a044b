"""Memory-access experiments: blocked matrix product, column sums, gathers."""

from __future__ import annotations

import os
import random
from typing import MutableSequence, Sequence

Matrix = list[list[float]]

DEFAULT_SIZE = 1024
DEFAULT_BLOCK = 32
GATHER_SIZE = 32768


def init_matrices(n: int = DEFAULT_SIZE) -> tuple[Matrix, Matrix, Matrix]:
    """Return a, b, c with a[i][j] = i + j, b[i][j] = i * j and c all zero."""
    a = [[float(i + j) for j in range(n)] for i in range(n)]
    b = [[float(i * j) for j in range(n)] for i in range(n)]
    c = [[0.0] * n for _ in range(n)]
    return a, b, c


def matmul(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    c: MutableSequence[MutableSequence[float]],
) -> None:
    """Accumulate the product a x b into c, row by row."""
    columns = list(zip(*b))
    for a_row, c_row in zip(a, c):
        for j, column in enumerate(columns):
            acc = c_row[j]
            for x, y in zip(a_row, column):
                acc += x * y
            c_row[j] = acc


def blocked_matmul(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    c: MutableSequence[MutableSequence[float]],
    block: int = DEFAULT_BLOCK,
) -> None:
    """Accumulate a x b into c, tiling the column and inner dimensions."""
    if block <= 0:
        raise ValueError(f"block size must be positive, got {block}")
    inner = len(b)
    cols = len(c[0]) if c else 0
    for jj in range(0, cols, block):
        j_range = range(jj, min(jj + block, cols))
        for kk in range(0, inner, block):
            k_range = range(kk, min(kk + block, inner))
            for a_row, c_row in zip(a, c):
                for j in j_range:
                    acc = c_row[j]
                    for k in k_range:
                        acc += a_row[k] * b[k][j]
                    c_row[j] = acc


def checksum_reset(c: MutableSequence[MutableSequence[float]]) -> float:
    """Sum every element of c, then set them all to zero."""
    total = 0.0
    for row in c:
        for value in row:
            total += value
        row[:] = [0.0] * len(row)
    return total


def column_sum(matrix: Sequence[Sequence[float]], repetitions: int = 1) -> float:
    """Add up the matrix column by column, the given number of times."""
    total = 0.0
    columns = list(zip(*matrix))
    for _ in range(repetitions):
        for column in columns:
            for value in column:
                total += value
    return total


def _check_gather_size(n: int) -> None:
    if n < 2:
        raise ValueError(f"gather size must be at least 2, got {n}")


def gather_sum(n: int = GATHER_SIZE, rng: random.Random | None = None) -> int:
    """Fill a with 0..n-1 and random indices b, then add a[b[i]] over the first quarter."""
    _check_gather_size(n)
    source = rng if rng is not None else random
    a = list(range(n))
    b = [source.randrange(n - 1) for _ in range(n)]
    return sum(a[index] for index in b[: n // 4])


def fused_gather_sum(n: int = GATHER_SIZE, rng: random.Random | None = None) -> int:
    """The gather done inside the filling loop.

    An index that points past the current position reads a slot that is
    still zero, so the result never exceeds that of gather_sum.
    """
    _check_gather_size(n)
    source = rng if rng is not None else random
    a = [0] * n
    quarter = n // 4
    total = 0
    for i in range(n):
        index = source.randrange(n - 1)
        a[i] = i
        if i < quarter:
            total += a[index]
    return total


def cpu_times() -> tuple[float, float]:
    """User and system CPU seconds used by this process."""
    times = os.times()
    return times.user, times.system