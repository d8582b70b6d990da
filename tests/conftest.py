from __future__ import annotations

import shutil
import sys
from pathlib import Path

import numpy as np
import pytest

# pytest may run without installing the project; ensure repo root is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from streamta.core.candle import Candle  # noqa: E402


@pytest.fixture()
def random_candles() -> list[Candle]:
    """A seeded random walk of 300 bars with a little intrabar range."""

    rng = np.random.default_rng(7)
    close = 100.0 + np.cumsum(rng.normal(0.0, 1.0, 300))
    spread = np.abs(rng.normal(0.0, 0.5, 300))
    open_ = np.concatenate(([close[0]], close[:-1]))
    high = np.maximum(open_, close) + spread
    low = np.minimum(open_, close) - spread
    volume = rng.uniform(10.0, 100.0, 300)
    return [
        Candle(open=float(o), high=float(h), low=float(lo), close=float(c), volume=float(v))
        for o, h, lo, c, v in zip(open_, high, low, close, volume)
    ]


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    """Copy of the repo config directory."""

    dst = tmp_path / "config"
    shutil.copytree(REPO_ROOT / "config", dst)
    return dst
