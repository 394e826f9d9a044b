"""An array-backed binary min-heap and heap sort."""

from __future__ import annotations

from typing import Iterable, MutableSequence

DEFAULT_CAPACITY = 256000

# Positions after which a new tree level begins when printing.
_LEVEL_ENDS = frozenset({0, 2, 6, 14})


class HeapCapacityError(ValueError):
    """Raised when more values are given than the heap can hold."""


class MinHeap:
    """Binary min-heap built from a sequence of values."""

    def __init__(self, values: Iterable[int], capacity: int = DEFAULT_CAPACITY):
        data = list(values)
        if len(data) > capacity:
            raise HeapCapacityError(
                f"maximum size exceeded: {len(data)} > {capacity}"
            )
        self.capacity = capacity
        self._data = data
        for i in range((len(data) - 1) // 2, -1, -1):
            self._sink(i)

    def _sink(self, i: int) -> None:
        data = self._data
        last = len(data) - 1
        while True:
            start = i
            left, right = 2 * i + 1, 2 * i + 2
            if right <= last and data[right] < data[i]:
                i = right
            if left <= last and data[left] < data[i]:
                i = left
            data[start], data[i] = data[i], data[start]
            if start == i:
                return

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def pop_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        smallest = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sink(0)
        return smallest

    def items(self) -> list[int]:
        """The heap's values in array order."""
        return list(self._data)

    def format_levels(self) -> str:
        """The values laid out one tree level per line for the first levels."""
        parts = []
        for i, value in enumerate(self._data):
            parts.append(f"{value} ")
            if i in _LEVEL_ENDS:
                parts.append("\n")
        parts.append("\n\n")
        return "".join(parts)


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort in place by building a min-heap and draining it."""
    heap = MinHeap(values)
    values[:] = [heap.pop_min() for _ in range(len(values))]