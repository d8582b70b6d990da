"""streamta.methods.wma

Weighted moving average with linearly decreasing weights.

The newest value weighs ``length``, the oldest weighs 1. Both the weighted
numerator and the plain window sum are updated in O(1) per step.
"""

from __future__ import annotations

from streamta.core.exceptions import WrongConfigError
from streamta.core.method import Method
from streamta.core.types import ValueType
from streamta.core.window import Window


class WMA(Method[ValueType, ValueType]):
    def __init__(self, length: int, value: ValueType) -> None:
        if length < 1:
            raise WrongConfigError("WMA", f"length must be >= 1, got {length}")
        self._length = length
        self._window = Window(length, value)
        self._weights_sum = length * (length + 1) / 2.0
        self._numerator = value * self._weights_sum
        self._sum = value * length

    def next(self, value: ValueType) -> ValueType:
        evicted = self._window.push(value)
        self._numerator += self._length * value - self._sum
        self._sum += value - evicted
        return self._numerator / self._weights_sum
