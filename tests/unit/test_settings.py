from __future__ import annotations

from pathlib import Path

import pytest

from streamta.core.config import LoggingConfig, Settings, load_presets
from streamta.core.exceptions import ConfigError, ParameterParseError


def test_settings_defaults() -> None:
    s = Settings()
    assert s.logging.level == "INFO"
    assert s.logging.json_output is False
    assert s.presets_path is None


def test_settings_from_yaml(config_dir: Path) -> None:
    s = Settings.from_yaml(config_dir / "default.yaml")
    assert s.presets_path == Path("config/presets.yaml")


def test_settings_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STREAMTA_LOGGING__LEVEL", "debug")
    assert Settings().logging.level == "DEBUG"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValueError):
        LoggingConfig(level="chatty")


def test_settings_from_yaml_raises_if_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        Settings.from_yaml(tmp_path / "missing.yaml")


def test_load_presets(config_dir: Path) -> None:
    configs = load_presets(config_dir / "presets.yaml")
    assert [c.name for c in configs] == [
        "HullMovingAverage",
        "PivotReversal",
        "HmaEmaCrossOver",
        "HMAPivotReversal",
        "PivotReversalStrategy",
    ]
    assert configs[0].period == 10
    assert configs[1].get("source") == "hl2"
    assert configs[2].period == 21
    assert all(c.is_valid() for c in configs)


def test_load_presets_unknown_name(tmp_path: Path) -> None:
    p = tmp_path / "presets.yaml"
    p.write_text("indicators:\n  - name: Nope\n")
    with pytest.raises(ConfigError):
        load_presets(p)


def test_load_presets_bad_param(tmp_path: Path) -> None:
    p = tmp_path / "presets.yaml"
    p.write_text("indicators:\n  - name: HullMovingAverage\n    params:\n      period: nine\n")
    with pytest.raises(ParameterParseError):
        load_presets(p)


def test_load_presets_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_presets(tmp_path / "missing.yaml")


def test_settings_load_presets(config_dir: Path) -> None:
    s = Settings(presets_path=config_dir / "presets.yaml")
    configs = s.load_presets()
    assert len(configs) == 5
    assert configs[0].name == "HullMovingAverage"


def test_settings_load_presets_from_env(config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STREAMTA_PRESETS_PATH", str(config_dir / "presets.yaml"))
    assert [c.name for c in Settings().load_presets()][-1] == "PivotReversalStrategy"


def test_settings_load_presets_requires_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STREAMTA_PRESETS_PATH", raising=False)
    with pytest.raises(ConfigError):
        Settings().load_presets()
