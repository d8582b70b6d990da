"""streamta.methods.ema"""

from __future__ import annotations

from streamta.core.exceptions import WrongConfigError
from streamta.core.method import Method
from streamta.core.types import ValueType


class EMA(Method[ValueType, ValueType]):
    """Exponential moving average, ``alpha = 2 / (length + 1)``, seeded with ``value``."""

    def __init__(self, length: int, value: ValueType) -> None:
        if length < 1:
            raise WrongConfigError("EMA", f"length must be >= 1, got {length}")
        self._alpha = 2.0 / (length + 1)
        self._value = value

    def next(self, value: ValueType) -> ValueType:
        self._value += self._alpha * (value - self._value)
        return self._value
