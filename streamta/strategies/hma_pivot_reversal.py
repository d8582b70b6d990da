"""streamta.strategies.hma_pivot_reversal

HMA pivot reversal.

The HMA value of each bar is fed to a lag-window reversal detector; the
detector's signal is forwarded unchanged.

1 value: HMA. 1 signal: ``SELL_ALL`` on a confirmed HMA peak, ``BUY_ALL`` on a
confirmed trough, ``NONE`` otherwise.
"""

from __future__ import annotations

from typing import ClassVar

from streamta.core.candle import OHLCV
from streamta.core.indicator import IndicatorInstance
from streamta.core.result import StrategyResult
from streamta.core.strategy import StrategyConfig, StrategyInstance
from streamta.core.types import PeriodType, Source
from streamta.indicators.hull_moving_average import HullMovingAverage
from streamta.methods.reversal import ReversalSignal
from streamta.registry import register_strategy


@register_strategy
class HMAPivotReversal(StrategyConfig):
    NAME: ClassVar[str] = "HMAPivotReversal"

    period: PeriodType = 9
    left: PeriodType = 3
    right: PeriodType = 2
    source: Source = Source.CLOSE

    def hma(self) -> HullMovingAverage:
        return HullMovingAverage(period=self.period, left=self.left, right=self.right, source=self.source)

    def is_valid(self) -> bool:
        # the HMA predicate bounds left/right the same way ReversalSignal does
        return self.hma().is_valid()

    def size(self) -> tuple[int, int]:
        return (1, 1)

    def _instantiate(self, cfg: HMAPivotReversal, candle: OHLCV) -> HMAPivotReversalInstance:
        hma = cfg.hma().init(candle)
        pivot = ReversalSignal(cfg.left, cfg.right, candle.source(cfg.source))
        return HMAPivotReversalInstance(cfg, hma, pivot)


class HMAPivotReversalInstance(StrategyInstance[HMAPivotReversal]):
    def __init__(self, cfg: HMAPivotReversal, hma: IndicatorInstance, pivot: ReversalSignal) -> None:
        super().__init__(cfg)
        self._hma = hma
        self._pivot = pivot

    def next(self, candle: OHLCV) -> StrategyResult:
        res = self._hma.next(candle)
        signal = self._pivot.next(res.value(0))
        return StrategyResult(res.values(), (signal,))
