"""Service contract for processing chains.

A service is a single-method transform. Chains are built by feeding the
output of one service into the next; whatever runs the chain only needs
``process``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

__all__ = ["Service"]

InT = TypeVar("InT")
OutT = TypeVar("OutT")


class Service(ABC, Generic[InT, OutT]):
    """Transforms one input into one output.

    Failures are signalled by raising. Services that cannot fail say so in
    their ``process`` docstring.

    Example:
        class Upper(Service[str, str]):
            def process(self, input: str) -> str:
                return input.upper()

        Upper().process("abc")  # "ABC"
        list(map(Upper(), ["a", "b"]))  # ["A", "B"]
    """

    @abstractmethod
    def process(self, input: InT) -> OutT:
        """Process one input."""
        ...

    def __call__(self, input: InT) -> OutT:
        return self.process(input)
