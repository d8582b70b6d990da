from __future__ import annotations

from streamta.core.exceptions import ConfigError, ParameterParseError, StreamTAError, WrongConfigError


def test_exception_hierarchy_is_structural() -> None:
    assert issubclass(ConfigError, StreamTAError)
    assert issubclass(WrongConfigError, ConfigError)
    assert issubclass(ParameterParseError, ConfigError)


def test_parameter_parse_error_carries_name_and_value() -> None:
    e = ParameterParseError("period", "abc")
    assert (e.name, e.value) == ("period", "abc")
    assert "period" in str(e) and "abc" in str(e)


def test_wrong_config_error_message() -> None:
    assert str(WrongConfigError("HMA")) == "wrong config: HMA"
    assert str(WrongConfigError("HMA", "length must be >= 2")) == "wrong config: HMA (length must be >= 2)"
