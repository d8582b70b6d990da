"""streamta.core.exceptions

Errors are part of the interface.

Everything here is raised at construction time. ``next`` never raises.
"""

from __future__ import annotations


class StreamTAError(Exception):
    """Base exception for streamta."""


class ConfigError(StreamTAError):
    """Settings or preset file is missing, invalid, or inconsistent."""


class WrongConfigError(ConfigError):
    """Parameters parse individually but are jointly invalid."""

    def __init__(self, name: str, detail: str | None = None) -> None:
        self.name = name
        msg = f"wrong config: {name}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ParameterParseError(ConfigError):
    """A named parameter is unknown or its value cannot be parsed."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"cannot parse parameter {name!r} from value {value!r}")
