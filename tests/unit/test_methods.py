from __future__ import annotations

import numpy as np
import pytest

from streamta.core.exceptions import WrongConfigError
from streamta.methods import EMA, HMA, WMA


def _wma_reference(x: np.ndarray, n: int) -> float:
    weights = np.arange(1, n + 1, dtype=np.float64)
    return float(np.dot(x[-n:], weights) / weights.sum())


def test_wma_matches_direct_formula_after_warmup() -> None:
    rng = np.random.default_rng(3)
    x = rng.normal(100.0, 5.0, 60)
    m = WMA(5, float(x[0]))
    out = m.over(x[1:])
    for i in range(10, 59):
        assert out[i - 1] == pytest.approx(_wma_reference(x[: i + 1], 5))


def test_wma_length_one_is_identity() -> None:
    m = WMA(1, 0.0)
    assert m.over([3.0, -2.0, 7.5]) == [3.0, -2.0, 7.5]


def test_ema_step() -> None:
    m = EMA(3, 10.0)  # alpha = 0.5
    assert m.next(20.0) == 15.0
    assert m.next(15.0) == 15.0


@pytest.mark.parametrize("method", [lambda v: WMA(4, v), lambda v: EMA(4, v), lambda v: HMA(9, v)])
def test_constant_input_is_a_fixed_point(method) -> None:
    m = method(42.0)
    for out in m.over([42.0] * 30):
        assert out == pytest.approx(42.0)


def test_hma_lag_on_a_linear_trend() -> None:
    # WMA(n) lags a straight line by (n - 1) / 3; for n = 16 the Hull
    # combination leads by 1/3 and the final WMA(4) lags by 1.
    x = [float(i) for i in range(100)]
    m = HMA(16, x[0])
    out = m.over(x[1:])
    assert out[-1] == pytest.approx(x[-1] - 2.0 / 3.0)


@pytest.mark.parametrize(
    "factory",
    [lambda: WMA(0, 1.0), lambda: EMA(0, 1.0), lambda: HMA(1, 1.0)],
)
def test_invalid_lengths_rejected_at_construction(factory) -> None:
    with pytest.raises(WrongConfigError):
        factory()
