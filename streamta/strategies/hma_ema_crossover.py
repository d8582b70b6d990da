"""streamta.strategies.hma_ema_crossover

HMA/EMA crossover.

Level comparison, evaluated every bar:
- ``BUY_ALL`` while EMA > HMA
- ``SELL_ALL`` otherwise

There is no edge detection: the signal repeats for as long as the relation
holds.

2 values: ``(hma, ema)``. 1 signal.
"""

from __future__ import annotations

from typing import ClassVar

from streamta.core.candle import OHLCV
from streamta.core.indicator import IndicatorInstance
from streamta.core.result import StrategyResult
from streamta.core.strategy import StrategyConfig, StrategyInstance
from streamta.core.types import Action, PeriodType, Source
from streamta.indicators.hull_moving_average import HullMovingAverage
from streamta.methods.ema import EMA
from streamta.registry import register_strategy


@register_strategy
class HmaEmaCrossOver(StrategyConfig):
    NAME: ClassVar[str] = "HmaEmaCrossOver"

    period: PeriodType = 9
    left: PeriodType = 3
    right: PeriodType = 2
    source: Source = Source.CLOSE

    def hma(self) -> HullMovingAverage:
        return HullMovingAverage(period=self.period, left=self.left, right=self.right, source=self.source)

    def is_valid(self) -> bool:
        # HMA needs period > 2, which also covers the EMA
        return self.hma().is_valid()

    def size(self) -> tuple[int, int]:
        return (2, 1)

    def _instantiate(self, cfg: HmaEmaCrossOver, candle: OHLCV) -> HmaEmaCrossOverInstance:
        hma = cfg.hma().init(candle)
        ema = EMA(cfg.period, candle.source(cfg.source))
        return HmaEmaCrossOverInstance(cfg, hma, ema)


class HmaEmaCrossOverInstance(StrategyInstance[HmaEmaCrossOver]):
    def __init__(self, cfg: HmaEmaCrossOver, hma: IndicatorInstance, ema: EMA) -> None:
        super().__init__(cfg)
        self._hma = hma
        self._ema = ema

    def next(self, candle: OHLCV) -> StrategyResult:
        hma_value = self._hma.next(candle).value(0)
        ema_value = self._ema.next(candle.source(self._cfg.source))
        signal = Action.BUY_ALL if ema_value > hma_value else Action.SELL_ALL
        return StrategyResult((hma_value, ema_value), (signal,))
