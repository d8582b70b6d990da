from __future__ import annotations

from collections.abc import Iterable

from streamta.core.candle import Candle


def candles_from_closes(closes: Iterable[float]) -> list[Candle]:
    return [Candle.flat(float(c), volume=1.0) for c in closes]
