"""streamta.indicators.hull_moving_average

Hull Moving Average indicator.

1 value:
- HMA of the selected source. Same range as the source.

``left`` and ``right`` are the lag windows used to confirm HMA reversals.
This indicator only validates them; strategies built on an HMA config
(e.g. ``HMAPivotReversal``) feed the HMA into a reversal detector with them.
"""

from __future__ import annotations

from typing import ClassVar

from streamta.core.candle import OHLCV
from streamta.core.indicator import IndicatorConfig, IndicatorInstance
from streamta.core.result import IndicatorResult
from streamta.core.types import PERIOD_MAX, PeriodType, Source
from streamta.methods.hma import HMA
from streamta.registry import register_indicator


@register_indicator
class HullMovingAverage(IndicatorConfig):
    NAME: ClassVar[str] = "HullMovingAverage"

    period: PeriodType = 9
    left: PeriodType = 3
    right: PeriodType = 2
    source: Source = Source.CLOSE

    def is_valid(self) -> bool:
        return self.period > 2 and self.left >= 1 and self.right >= 1 and self.left + self.right < PERIOD_MAX

    def size(self) -> tuple[int, int]:
        return (1, 0)

    def _instantiate(self, cfg: HullMovingAverage, candle: OHLCV) -> HullMovingAverageInstance:
        return HullMovingAverageInstance(cfg, HMA(cfg.period, candle.source(cfg.source)))


class HullMovingAverageInstance(IndicatorInstance[HullMovingAverage]):
    def __init__(self, cfg: HullMovingAverage, hma: HMA) -> None:
        super().__init__(cfg)
        self._hma = hma

    def next(self, candle: OHLCV) -> IndicatorResult:
        return IndicatorResult((self._hma.next(candle.source(self._cfg.source)),))
