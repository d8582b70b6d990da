"""streamta.core.window

Fixed-capacity circular buffer of floats.

The backing numpy array is allocated once; pushing overwrites the oldest slot.
Logical index 0 is the oldest value, ``len(w) - 1`` the newest.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from streamta.core.types import ValueType


class Window:
    __slots__ = ("_buf", "_index")

    def __init__(self, size: int, value: ValueType) -> None:
        if size < 1:
            raise ValueError(f"window size must be >= 1, got {size}")
        self._buf = np.full(size, value, dtype=np.float64)
        self._index = 0  # slot of the oldest value

    def push(self, value: ValueType) -> ValueType:
        """Store ``value`` as the newest element and return the evicted one."""

        i = self._index
        evicted = float(self._buf[i])
        self._buf[i] = value
        i += 1
        self._index = 0 if i == self._buf.shape[0] else i
        return evicted

    def __len__(self) -> int:
        return self._buf.shape[0]

    def __getitem__(self, index: int) -> ValueType:
        n = self._buf.shape[0]
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError(f"window index out of range: {index}")
        return float(self._buf[(self._index + index) % n])

    def __iter__(self) -> Iterator[ValueType]:
        n = self._buf.shape[0]
        for k in range(n):
            yield float(self._buf[(self._index + k) % n])

    def oldest(self) -> ValueType:
        return float(self._buf[self._index])

    def newest(self) -> ValueType:
        return float(self._buf[self._index - 1])

    def max(self) -> ValueType:
        return float(self._buf.max())

    def min(self) -> ValueType:
        return float(self._buf.min())

    def __repr__(self) -> str:
        return f"Window({list(self)!r})"
