"""streamta.core.method

Method contract: the smallest stateful streaming transform.

A method consumes one input per bar, in arrival order, and returns one output.
It sees only the current input and its own state. Parameters are checked in
the constructor (raising :class:`~streamta.core.exceptions.WrongConfigError`);
``next`` itself never fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Method(ABC, Generic[InputT, OutputT]):
    @abstractmethod
    def next(self, value: InputT) -> OutputT:
        raise NotImplementedError

    def over(self, values: Iterable[InputT]) -> list[OutputT]:
        """Feed a sequence and collect every output."""

        return [self.next(v) for v in values]
