"""streamta.methods.hma

Hull moving average.

HMA(n) = WMA(floor(sqrt(n))) applied to 2 * WMA(n // 2) - WMA(n).
"""

from __future__ import annotations

import math

from streamta.core.exceptions import WrongConfigError
from streamta.core.method import Method
from streamta.core.types import ValueType
from streamta.methods.wma import WMA


class HMA(Method[ValueType, ValueType]):
    def __init__(self, length: int, value: ValueType) -> None:
        if length < 2:
            raise WrongConfigError("HMA", f"length must be >= 2, got {length}")
        self._half = WMA(length // 2, value)
        self._full = WMA(length, value)
        self._smooth = WMA(math.isqrt(length), value)

    def next(self, value: ValueType) -> ValueType:
        diff = 2.0 * self._half.next(value) - self._full.next(value)
        return self._smooth.next(diff)
