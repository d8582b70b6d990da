"""streamta.core.parameters

Named-parameter record shared by indicator and strategy configs.

Two levels of checking:
- field types (pydantic) decide whether a single value parses;
- ``is_valid()`` decides whether the parameters make sense together, and is
  only consulted when state is about to be built.

``set`` is the string entry point used by config loaders. It either applies
the value or raises :class:`ParameterParseError`; a failed call leaves the
record untouched.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from streamta.core.exceptions import ParameterParseError

logger = logging.getLogger(__name__)


class Parameters(BaseModel, ABC):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    NAME: ClassVar[str] = ""

    @property
    def name(self) -> str:
        return self.NAME

    @abstractmethod
    def is_valid(self) -> bool:
        """Joint validity of the parameters."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Static count of (values, signals) produced per step."""

    @classmethod
    def parameter_names(cls) -> list[str]:
        return list(cls.model_fields)

    def set(self, name: str, value: str) -> None:
        if name not in type(self).model_fields:
            logger.debug("parameter_parse_failed", extra={"config": self.NAME, "param": name, "value": value})
            raise ParameterParseError(name, value)
        try:
            setattr(self, name, value)
        except ValidationError as e:
            logger.debug("parameter_parse_failed", extra={"config": self.NAME, "param": name, "value": value})
            raise ParameterParseError(name, value) from e

    def get(self, name: str) -> str:
        if name not in type(self).model_fields:
            raise KeyError(f"unknown parameter for {self.NAME}: {name}")
        return str(getattr(self, name))
