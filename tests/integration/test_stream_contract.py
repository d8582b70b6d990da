from __future__ import annotations

from streamta.core.indicator import IndicatorConfig, IndicatorInstance
from streamta.core.result import IndicatorResult, StrategyResult
from streamta.core.strategy import StrategyConfig, StrategyInstance
from streamta.registry import discover, get_indicator, get_strategy, list_indicators, list_strategies


def test_all_registered_indicators_follow_contract(random_candles) -> None:
    discover()
    names = list_indicators()
    assert names, "expected at least one registered indicator"

    for name in names:
        cls = get_indicator(name)
        cfg = cls()
        assert isinstance(cfg, IndicatorConfig)
        assert cfg.name == name
        assert cfg.is_valid(), name

        n_values, n_signals = cfg.size()
        assert 0 < n_values <= IndicatorResult.SIZE
        assert n_signals == 0

        for param in cls.parameter_names():
            cfg.set(param, cfg.get(param))
        assert cfg == cls()

        inst = cfg.init(random_candles[0])
        assert isinstance(inst, IndicatorInstance)
        for c in random_candles:
            res = inst.next(c)
            assert isinstance(res, IndicatorResult)
            assert res.values_length() == n_values, name


def test_all_registered_strategies_follow_contract(random_candles) -> None:
    discover()
    names = list_strategies()
    assert names, "expected at least one registered strategy"

    for name in names:
        cls = get_strategy(name)
        cfg = cls()
        assert isinstance(cfg, StrategyConfig)
        assert cfg.name == name

        size = cfg.size()
        inst = cfg.init(random_candles[0])
        assert isinstance(inst, StrategyInstance)
        for c in random_candles:
            res = inst.next(c)
            assert isinstance(res, StrategyResult)
            assert res.size() == size, name
            assert all(-1.0 <= s.ratio() <= 1.0 for s in res.signals())
