"""streamta.indicators.pivot_reversal

Pivot reversal indicator: the lag-window detector on a raw source.

1 value:
- detector output as a ratio: -1.0 after a confirmed peak, +1.0 after a
  confirmed trough, 0.0 otherwise.
"""

from __future__ import annotations

from typing import ClassVar

from streamta.core.candle import OHLCV
from streamta.core.indicator import IndicatorConfig, IndicatorInstance
from streamta.core.result import IndicatorResult
from streamta.core.types import PERIOD_MAX, PeriodType, Source
from streamta.methods.reversal import ReversalSignal
from streamta.registry import register_indicator


@register_indicator
class PivotReversal(IndicatorConfig):
    NAME: ClassVar[str] = "PivotReversal"

    left: PeriodType = 3
    right: PeriodType = 2
    source: Source = Source.CLOSE

    def is_valid(self) -> bool:
        return self.left >= 1 and self.right >= 1 and self.left + self.right < PERIOD_MAX

    def size(self) -> tuple[int, int]:
        return (1, 0)

    def _instantiate(self, cfg: PivotReversal, candle: OHLCV) -> PivotReversalInstance:
        return PivotReversalInstance(cfg, ReversalSignal(cfg.left, cfg.right, candle.source(cfg.source)))


class PivotReversalInstance(IndicatorInstance[PivotReversal]):
    def __init__(self, cfg: PivotReversal, pivot: ReversalSignal) -> None:
        super().__init__(cfg)
        self._pivot = pivot

    def next(self, candle: OHLCV) -> IndicatorResult:
        action = self._pivot.next(candle.source(self._cfg.source))
        return IndicatorResult((action.ratio(),))
