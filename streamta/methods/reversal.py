"""streamta.methods.reversal

Lag-window pivot detection.

The detector keeps the last ``left + right + 1`` values. The element with
exactly ``left`` older and ``right`` newer neighbours is the candidate:

- candidate is the window maximum, strictly above every older value and
  strictly above at least one newer value -> peak, ``Action.SELL_ALL`` (price
  expected to turn down);
- candidate is the window minimum, strictly below every older value and
  strictly below at least one newer value -> trough, ``Action.BUY_ALL``;
- otherwise ``Action.NONE``.

On a plateau only the earliest occurrence of the extremum can be the pivot,
and only when it sits at the fixed position, so a pivot is always confirmed
exactly ``right`` steps after it happened. Until ``left + right + 1`` values
have been fed through ``next`` the output is ``Action.NONE``; the constructor
seed only pre-fills the buffer.
"""

from __future__ import annotations

from streamta.core.exceptions import WrongConfigError
from streamta.core.method import Method
from streamta.core.types import PERIOD_MAX, Action, ValueType
from streamta.core.window import Window


class ReversalSignal(Method[ValueType, Action]):
    def __init__(self, left: int, right: int, value: ValueType) -> None:
        if left < 1 or right < 1:
            raise WrongConfigError("ReversalSignal", f"left and right must be >= 1, got {left}, {right}")
        if left + right >= PERIOD_MAX:
            raise WrongConfigError("ReversalSignal", f"left + right must be < {PERIOD_MAX}, got {left + right}")
        self._left = left
        self._size = left + right + 1
        self._window = Window(self._size, value)
        self._seen = 0

    @property
    def is_ready(self) -> bool:
        return self._seen >= self._size

    def next(self, value: ValueType) -> Action:
        self._window.push(value)
        if self._seen < self._size:
            self._seen += 1
            if self._seen < self._size:
                return Action.NONE

        w = self._window
        left = self._left
        candidate = w[left]

        if candidate == w.max():
            if all(w[i] < candidate for i in range(left)) and any(w[i] < candidate for i in range(left + 1, self._size)):
                return Action.SELL_ALL
        elif candidate == w.min():
            if all(w[i] > candidate for i in range(left)) and any(w[i] > candidate for i in range(left + 1, self._size)):
                return Action.BUY_ALL
        return Action.NONE
