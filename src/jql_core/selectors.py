"""Selector resolution: identity, field, index, slice and iteration."""

from __future__ import annotations

from .errors import IndexOutOfBounds, KeyNotFound, ListNotFound
from .expression import (
    BracketForm,
    bracket_content,
    bracket_form,
    parse_index,
    parse_slice,
)
from .result import FilterResult, Sequence, Single
from .values import Value, VArray, VObject, clone


def select_identity(value: Value) -> FilterResult:
    return Single(clone(value))


def select_field(value: Value, stage: str) -> FilterResult:
    """Resolve ``.key`` on an object; the key is everything after the dot."""
    key = stage[1:]
    if isinstance(value, VObject) and key in value.entries:
        return Single(clone(value.entries[key]))
    raise KeyNotFound(key)


def select_bracket(value: Value, stage: str) -> FilterResult:
    """Resolve ``.[]``, ``.[a:b]`` or ``.[i]`` on an array.

    The array check comes first, so ``.[x]`` on an object is ``ListNotFound``
    rather than a parse failure.
    """
    if not isinstance(value, VArray):
        raise ListNotFound()

    content = bracket_content(stage)
    form = bracket_form(content)
    if form is BracketForm.ITERATE:
        return array_iterator(value)
    if form is BracketForm.SLICE:
        start, end = parse_slice(content)
        return Single(array_slice(value, start, end))
    return Single(array_index(value, parse_index(content)))


# ---------------------------------------------------------------------------
# Array helpers
# ---------------------------------------------------------------------------

def array_index(array: VArray, index: int) -> Value:
    if index >= len(array.items):
        raise IndexOutOfBounds()
    return clone(array.items[index])


def array_slice(array: VArray, start: int, end: int) -> VArray:
    """Half-open ``[start, end)``; requires ``start < end <= len``."""
    if not (0 <= start < end <= len(array.items)):
        raise IndexOutOfBounds()
    return VArray([clone(v) for v in array.items[start:end]])


def array_iterator(array: VArray) -> Sequence:
    items = list(array.items)
    return Sequence(clone(v) for v in items)
