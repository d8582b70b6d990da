"""streamta.core.result

Bounded per-step output of indicators and strategies.

Every indicator returns an :class:`IndicatorResult` with up to ``SIZE`` raw
values per step; every strategy returns a :class:`StrategyResult` with up to
``SIZE`` values and up to ``SIZE`` signals. Storage is a fixed tuple padded to
capacity. Supplying more than ``SIZE`` entries is not an error: the excess is
dropped.

Index checks on ``value``/``signal`` are plain ``assert`` statements. They run
during development and vanish under ``python -O``; callers must keep indices
below the reported length either way.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import ClassVar

from streamta.core.types import Action, ValueType

SIZE = 4

_ZEROS: tuple[ValueType, ...] = (0.0,) * SIZE
_NONES: tuple[Action, ...] = (Action.NONE,) * SIZE


def _pack_values(values: Iterable[ValueType]) -> tuple[tuple[ValueType, ...], int]:
    head = tuple(float(v) for v in islice(values, SIZE))
    n = len(head)
    return head + _ZEROS[n:], n


def _pack_signals(signals: Iterable[Action]) -> tuple[tuple[Action, ...], int]:
    head = tuple(islice(signals, SIZE))
    n = len(head)
    return head + _NONES[n:], n


class IndicatorResult:
    SIZE: ClassVar[int] = SIZE

    __slots__ = ("_values", "_length")

    def __init__(self, values: Iterable[ValueType] = ()) -> None:
        self._values, self._length = _pack_values(values)

    def values(self) -> tuple[ValueType, ...]:
        return self._values[: self._length]

    def values_length(self) -> int:
        return self._length

    def size(self) -> int:
        return self._length

    def value(self, index: int) -> ValueType:
        assert 0 <= index < self._length, f"value index {index} out of range ({self._length})"
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndicatorResult):
            return NotImplemented
        return self.values() == other.values()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Values: [{', '.join(f'{v:>7.4f}' for v in self.values())}]"


class StrategyResult:
    """Values and signals of one strategy step.

    The two counts are independent: a strategy may report two values and a
    single signal.
    """

    SIZE: ClassVar[int] = SIZE

    __slots__ = ("_values", "_values_length", "_signals", "_signals_length")

    def __init__(self, values: Iterable[ValueType] = (), signals: Iterable[Action] = ()) -> None:
        self._values, self._values_length = _pack_values(values)
        self._signals, self._signals_length = _pack_signals(signals)

    def values(self) -> tuple[ValueType, ...]:
        return self._values[: self._values_length]

    def signals(self) -> tuple[Action, ...]:
        return self._signals[: self._signals_length]

    def values_length(self) -> int:
        return self._values_length

    def signals_length(self) -> int:
        return self._signals_length

    def size(self) -> tuple[int, int]:
        return self._values_length, self._signals_length

    def value(self, index: int) -> ValueType:
        assert 0 <= index < self._values_length, f"value index {index} out of range ({self._values_length})"
        return self._values[index]

    def signal(self, index: int) -> Action:
        assert 0 <= index < self._signals_length, f"signal index {index} out of range ({self._signals_length})"
        return self._signals[index]

    def indicator_result(self) -> IndicatorResult:
        return IndicatorResult(self.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategyResult):
            return NotImplemented
        return self.values() == other.values() and self.signals() == other.signals()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        signals = ", ".join(str(s) for s in self.signals())
        values = ", ".join(f"{v:>7.4f}" for v in self.values())
        return f"S: [{signals}], V: [{values}]"
