"""streamta.core.candle

Bar input contract.

Anything exposing open/high/low/close/volume and a ``source`` reduction can be
streamed. :class:`Candle` is the reference value type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from streamta.core.types import Source, ValueType


@runtime_checkable
class OHLCV(Protocol):
    open: ValueType
    high: ValueType
    low: ValueType
    close: ValueType
    volume: ValueType

    def source(self, source: Source) -> ValueType: ...


def source_value(candle: OHLCV, source: Source) -> ValueType:
    """Reduce any OHLCV-shaped bar to one scalar."""

    match source:
        case Source.CLOSE:
            return candle.close
        case Source.OPEN:
            return candle.open
        case Source.HIGH:
            return candle.high
        case Source.LOW:
            return candle.low
        case Source.HL2:
            return (candle.high + candle.low) / 2.0
        case Source.TP:
            return (candle.high + candle.low + candle.close) / 3.0
        case Source.OHLC4:
            return (candle.open + candle.high + candle.low + candle.close) / 4.0
        case Source.VOLUME:
            return candle.volume
        case Source.VOLUMED_PRICE:
            return (candle.high + candle.low + candle.close) / 3.0 * candle.volume
    raise ValueError(f"unknown source: {source!r}")


@dataclass(frozen=True, slots=True)
class Candle:
    open: ValueType
    high: ValueType
    low: ValueType
    close: ValueType
    volume: ValueType = 0.0

    @classmethod
    def flat(cls, price: ValueType, volume: ValueType = 0.0) -> Candle:
        """A bar whose four prices are all ``price``."""

        return cls(open=price, high=price, low=price, close=price, volume=volume)

    @property
    def tp(self) -> ValueType:
        return source_value(self, Source.TP)

    @property
    def hl2(self) -> ValueType:
        return source_value(self, Source.HL2)

    @property
    def ohlc4(self) -> ValueType:
        return source_value(self, Source.OHLC4)

    @property
    def volumed_price(self) -> ValueType:
        return source_value(self, Source.VOLUMED_PRICE)

    def source(self, source: Source) -> ValueType:
        return source_value(self, source)

    def is_valid(self) -> bool:
        return (
            self.low <= self.open <= self.high
            and self.low <= self.close <= self.high
            and self.volume >= 0.0
        )
