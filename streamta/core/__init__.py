"""streamta.core

Contracts and value types shared by methods, indicators and strategies.
"""

from streamta.core.candle import OHLCV, Candle, source_value
from streamta.core.exceptions import ConfigError, ParameterParseError, StreamTAError, WrongConfigError
from streamta.core.indicator import IndicatorConfig, IndicatorInstance
from streamta.core.method import Method
from streamta.core.result import IndicatorResult, StrategyResult
from streamta.core.strategy import StrategyConfig, StrategyInstance
from streamta.core.types import PERIOD_MAX, Action, PeriodType, Source, ValueType
from streamta.core.window import Window

__all__ = [
    "OHLCV",
    "PERIOD_MAX",
    "Action",
    "Candle",
    "ConfigError",
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    "Method",
    "ParameterParseError",
    "PeriodType",
    "Source",
    "StrategyConfig",
    "StrategyInstance",
    "StrategyResult",
    "StreamTAError",
    "ValueType",
    "WrongConfigError",
    "Window",
    "source_value",
]
