"""The shell's table of open files: descriptor slots, names and open modes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

try:
    import fcntl
except ImportError:  # not available on every platform
    fcntl = None

DEFAULT_SIZE = 100
FIRST_FREE = 3

_STANDARD_STREAMS = (
    (0, "entrada estandar", os.O_RDONLY),
    (1, "salida estandar", os.O_WRONLY),
    (2, "error estandar", os.O_WRONLY),
)

_MODE_WORDS = {
    "cr": os.O_CREAT,
    "ex": os.O_EXCL,
    "ro": os.O_RDONLY,
    "wo": os.O_WRONLY,
    "rw": os.O_RDWR,
    "ap": os.O_APPEND,
    "tr": os.O_TRUNC,
}

# Checked in this order; the first flag that is set names the mode.
_MODE_ORDER = (
    (os.O_WRONLY, "O_WRONLY"),
    (os.O_RDWR, "O_RDWR"),
    (os.O_APPEND, "O_APPEND"),
    (os.O_CREAT, "O_CREAT"),
    (os.O_EXCL, "O_EXCL"),
    (os.O_TRUNC, "O_TRUNC"),
)


class TableFullError(RuntimeError):
    """Raised when every descriptor slot of the table is taken."""


@dataclass(frozen=True)
class OpenFileEntry:
    """One occupied slot: its descriptor, the file name and the open mode."""

    descriptor: int
    name: str
    mode: int

    def __str__(self) -> str:
        return f"Descriptor {self.descriptor} -> {self.name} {mode_name(self.mode)}"


def mode_name(mode: int) -> str:
    """The name of the most significant open flag set in mode."""
    for flag, name in _MODE_ORDER:
        if mode & flag:
            return name
    return "O_RDONLY"


def parse_mode_flags(words: Iterable[str]) -> int:
    """Combine mode words (cr, ex, ro, wo, rw, ap, tr); stop at the first other word."""
    mode = 0
    for word in words:
        flag = _MODE_WORDS.get(word)
        if flag is None:
            break
        mode |= flag
    return mode


def _standard_mode(fd: int, fallback: int) -> int:
    if fcntl is None:
        return fallback
    try:
        return fcntl.fcntl(fd, fcntl.F_GETFL)
    except (OSError, ValueError):
        return fallback


class OpenFileTable:
    """Fixed-size table of open files; slots 0 to 2 hold the standard streams."""

    def __init__(self, size: int = DEFAULT_SIZE):
        if size < FIRST_FREE:
            raise ValueError(f"table size must be at least {FIRST_FREE}, got {size}")
        self.size = size
        self._slots: dict[int, OpenFileEntry] = {}
        for fd, name, fallback in _STANDARD_STREAMS:
            self._slots[fd] = OpenFileEntry(fd, name, _standard_mode(fd, fallback))

    def _check(self, descriptor: int) -> None:
        if not 0 <= descriptor < self.size:
            raise IndexError(f"descriptor {descriptor} out of range 0..{self.size - 1}")

    def add(self, name: str, mode: int) -> int:
        """Put a file in the first free slot from 3 upwards and return its descriptor."""
        for descriptor in range(FIRST_FREE, self.size):
            if descriptor not in self._slots:
                self._slots[descriptor] = OpenFileEntry(descriptor, name, mode)
                return descriptor
        raise TableFullError("no free descriptor in the open file table")

    def remove(self, descriptor: int) -> OpenFileEntry | None:
        """Free a slot; return what it held, or None if it was already empty."""
        self._check(descriptor)
        return self._slots.pop(descriptor, None)

    def get(self, descriptor: int) -> OpenFileEntry | None:
        """The entry at a descriptor, or None if that slot is empty."""
        self._check(descriptor)
        return self._slots.get(descriptor)

    def entries(self) -> list[OpenFileEntry]:
        """Occupied slots in descriptor order."""
        return [self._slots[d] for d in sorted(self._slots)]

    def format(self) -> str:
        """One line per occupied slot."""
        return "".join(f"{entry}\n" for entry in self.entries())