"""streamta.strategies.pivot_reversal

Pivot reversal on a raw source, wrapping the ``PivotReversal`` indicator.

The indicator's value is turned back into an :class:`Action` and forwarded as
the signal; the value itself is forwarded as well. Over any bar sequence the
signals equal those of a bare ``ReversalSignal`` fed the same scalars.
"""

from __future__ import annotations

from typing import ClassVar

from streamta.core.candle import OHLCV
from streamta.core.indicator import IndicatorInstance
from streamta.core.result import StrategyResult
from streamta.core.strategy import StrategyConfig, StrategyInstance
from streamta.core.types import Action, PeriodType, Source
from streamta.indicators.pivot_reversal import PivotReversal
from streamta.registry import register_strategy


@register_strategy
class PivotReversalStrategy(StrategyConfig):
    NAME: ClassVar[str] = "PivotReversalStrategy"

    left: PeriodType = 3
    right: PeriodType = 2
    source: Source = Source.CLOSE

    def indicator(self) -> PivotReversal:
        return PivotReversal(left=self.left, right=self.right, source=self.source)

    def is_valid(self) -> bool:
        return self.indicator().is_valid()

    def size(self) -> tuple[int, int]:
        return (1, 1)

    def _instantiate(self, cfg: PivotReversalStrategy, candle: OHLCV) -> PivotReversalStrategyInstance:
        indicator = cfg.indicator().init(candle)
        return PivotReversalStrategyInstance(cfg, indicator)


class PivotReversalStrategyInstance(StrategyInstance[PivotReversalStrategy]):
    def __init__(self, cfg: PivotReversalStrategy, indicator: IndicatorInstance) -> None:
        super().__init__(cfg)
        self._indicator = indicator

    def next(self, candle: OHLCV) -> StrategyResult:
        res = self._indicator.next(candle)
        return StrategyResult(res.values(), (Action.from_ratio(res.value(0)),))
