"""streamta.core.types

Scalar aliases, the source selector and the trading signal.

Dataclasses keep the hot path lean; pydantic stays at the parameter boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, ClassVar

from pydantic import Field

ValueType = float

# Periods and lag windows are bounded like an unsigned byte.
PERIOD_MAX = 255

PeriodType = Annotated[int, Field(ge=0, le=PERIOD_MAX)]


class Source(StrEnum):
    """Rule reducing a bar to one scalar."""

    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"
    VOLUME = "volume"
    VOLUMED_PRICE = "volumed_price"

    @classmethod
    def _missing_(cls, value: object) -> Source | None:
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


@dataclass(frozen=True, slots=True)
class Action:
    """Discrete trading conviction.

    ``strength`` is signed: positive buys, negative sells, zero is no signal.
    Full conviction is ``MAX_STRENGTH`` in either direction.
    """

    MAX_STRENGTH: ClassVar[int] = 255

    BUY_ALL: ClassVar[Action]
    SELL_ALL: ClassVar[Action]
    NONE: ClassVar[Action]

    strength: int = 0

    def __post_init__(self) -> None:
        if not -self.MAX_STRENGTH <= self.strength <= self.MAX_STRENGTH:
            raise ValueError(f"action strength out of range: {self.strength}")

    @classmethod
    def from_analog(cls, value: int) -> Action:
        """-1 sells all, +1 buys all, 0 is no signal. Only the sign matters."""

        if value > 0:
            return cls.BUY_ALL
        if value < 0:
            return cls.SELL_ALL
        return cls.NONE

    @classmethod
    def from_ratio(cls, value: float) -> Action:
        """Quantize a float in [-1, 1] to a strength. Out-of-range values are clamped."""

        if value != value:  # NaN
            return cls.NONE
        clamped = max(-1.0, min(1.0, value))
        return cls(round(clamped * cls.MAX_STRENGTH))

    @property
    def is_buy(self) -> bool:
        return self.strength > 0

    @property
    def is_sell(self) -> bool:
        return self.strength < 0

    @property
    def is_none(self) -> bool:
        return self.strength == 0

    def analog(self) -> int:
        return (self.strength > 0) - (self.strength < 0)

    def ratio(self) -> float:
        return self.strength / self.MAX_STRENGTH

    def __neg__(self) -> Action:
        return Action(-self.strength)

    def __str__(self) -> str:
        if self.strength == 0:
            return "N"
        return f"{self.strength:+d}"


Action.BUY_ALL = Action(Action.MAX_STRENGTH)
Action.SELL_ALL = Action(-Action.MAX_STRENGTH)
Action.NONE = Action(0)
