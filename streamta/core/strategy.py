"""streamta.core.strategy

Strategy contract: the indicator split one level up.

A strategy config builds its sub-indicators and methods in ``_instantiate``
using their own constructors. Whatever they raise reaches the caller as is;
the first failing sub-component aborts the whole strategy.

``is_valid`` is a pre-check over the same sub-component configs. ``init`` does
not gate on it, so a bad parameter is reported under the name of the
component that rejects it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from streamta.core.candle import OHLCV
from streamta.core.parameters import Parameters
from streamta.core.result import StrategyResult

ConfigT = TypeVar("ConfigT", bound="StrategyConfig")


class StrategyConfig(Parameters):
    def init(self, candle: OHLCV) -> StrategyInstance:
        return self._instantiate(self.model_copy(), candle)

    @abstractmethod
    def _instantiate(self, cfg: StrategyConfig, candle: OHLCV) -> StrategyInstance:
        """Build sub-components and the instance owning them."""


class StrategyInstance(ABC, Generic[ConfigT]):
    def __init__(self, cfg: ConfigT) -> None:
        self._cfg = cfg

    @property
    def config(self) -> ConfigT:
        return self._cfg.model_copy()

    @property
    def name(self) -> str:
        return self._cfg.NAME

    def size(self) -> tuple[int, int]:
        return self._cfg.size()

    @abstractmethod
    def next(self, candle: OHLCV) -> StrategyResult:
        raise NotImplementedError

    def over(self, candles: Iterable[OHLCV]) -> list[StrategyResult]:
        return [self.next(c) for c in candles]
