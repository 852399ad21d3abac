"""FilterResult: the two shapes a stage or a whole pipeline can produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .values import Value


@dataclass
class Single:
    value: Value


class Sequence:
    """Lazy, finite, single-pass run of values produced by fan-out.

    Iterating a Sequence a second time raises ``RuntimeError``.
    """

    def __init__(self, values: Iterable[Value]) -> None:
        self._values = values
        self._consumed = False

    def __iter__(self) -> Iterator[Value]:
        if self._consumed:
            raise RuntimeError("Sequence has already been consumed")
        self._consumed = True
        return iter(self._values)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "pending"
        return f"Sequence(<{state}>)"


FilterResult = Union[Single, Sequence]
