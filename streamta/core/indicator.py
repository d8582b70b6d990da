"""streamta.core.indicator

Indicator contract, split in two phases.

- :class:`IndicatorConfig` is a plain, mutable parameter record.
- :class:`IndicatorInstance` is the streaming state built from it by
  ``init(first_candle)``. The instance keeps its own copy of the config and
  exposes no way to change it.

Subclasses implement ``is_valid``, ``size`` and ``_instantiate``; ``init``
refuses to build state from an invalid config.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from streamta.core.candle import OHLCV
from streamta.core.exceptions import WrongConfigError
from streamta.core.parameters import Parameters
from streamta.core.result import IndicatorResult

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound="IndicatorConfig")


class IndicatorConfig(Parameters):
    def init(self, candle: OHLCV) -> IndicatorInstance:
        """Validate, then bind method states to the first candle."""

        if not self.is_valid():
            logger.debug("indicator_config_invalid", extra={"config": self.NAME, "params": self.model_dump(mode="json")})
            raise WrongConfigError(self.NAME)
        return self._instantiate(self.model_copy(), candle)

    @abstractmethod
    def _instantiate(self, cfg: IndicatorConfig, candle: OHLCV) -> IndicatorInstance:
        """Build the instance. ``cfg`` is a private copy already validated."""


class IndicatorInstance(ABC, Generic[ConfigT]):
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
    def next(self, candle: OHLCV) -> IndicatorResult:
        raise NotImplementedError

    def over(self, candles: Iterable[OHLCV]) -> list[IndicatorResult]:
        return [self.next(c) for c in candles]
