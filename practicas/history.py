"""Command history kept in the order the commands were entered."""

from __future__ import annotations

import re
from typing import Iterator

EMPTY_HISTORY = "History empty\n"
EMPTY_PREFIX = "Lista vacia. No hay nada que imprimir\n"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HistoryError(LookupError):
    """Raised when a history position cannot be resolved."""


def _parse_position(position: int | str) -> int:
    """Read a position the way a leading-integer parse does; 0 when none."""
    if isinstance(position, int):
        return position
    match = _LEADING_INT.match(position)
    return int(match.group(1)) if match else 0


class History:
    """The commands entered so far, numbered from 1."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, line: str) -> None:
        """Record a command line at the end of the history."""
        self._lines.append(line)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def get(self, position: int | str) -> str:
        """The command at a 1-based position, given as a number or text."""
        number = _parse_position(position)
        if number <= 0:
            raise HistoryError("Argument not recognized")
        if not self._lines:
            raise HistoryError("Lista vacia, no hay elementos")
        if number > len(self._lines):
            raise HistoryError("Not found")
        return self._lines[number - 1]

    def clear(self) -> None:
        """Forget every recorded command."""
        self._lines.clear()

    def format_all(self) -> str:
        """Every command with its number; lines keep their own line ends."""
        if not self._lines:
            return EMPTY_HISTORY
        return "".join(
            f"COMANDO {number}: {line}"
            for number, line in enumerate(self._lines, start=1)
        )

    def format_first(self, n: int) -> str:
        """The first n commands with their numbers, each followed by a newline."""
        if not self._lines:
            return EMPTY_PREFIX
        return "".join(
            f"COMANDO {number}: {line}\n"
            for number, line in enumerate(self._lines[: max(n, 0)], start=1)
        )