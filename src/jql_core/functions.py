"""Builtin functions: ``add``, ``length`` and ``del``."""

from __future__ import annotations

from typing import Callable

from .errors import (
    DictionaryNotFound,
    InvalidInput,
    InvalidNeedle,
    KeyNotFound,
    ListNotFound,
)
from .expression import bracket_content, call_argument, function_name, parse_index_list
from .values import Value, VArray, VBool, VNumber, VObject, VString, _Null, clone


def length_function(value: Value, stage: str = "length") -> Value:
    """Size of *value*.

    - VArray: element count
    - VString: code point count
    - VObject: key count
    - VNumber: absolute value of the integer part
    - Null: 0
    - VBool: InvalidInput
    """
    if isinstance(value, VArray):
        return VNumber(len(value.items))
    if isinstance(value, VString):
        return VNumber(len(value.value))
    if isinstance(value, VObject):
        return VNumber(len(value.entries))
    if isinstance(value, VNumber):
        return VNumber(abs(_as_int(value.value)))
    if isinstance(value, _Null):
        return VNumber(0)
    if isinstance(value, VBool):
        raise InvalidInput()
    raise TypeError(f"not a Value: {value!r}")


def add_function(value: Value, stage: str = "add") -> Value:
    """Sum an array of numbers or concatenate an array of strings."""
    if not isinstance(value, VArray):
        raise InvalidInput()
    items = value.items
    if all(isinstance(item, VNumber) for item in items):
        return VNumber(_as_int(sum(item.value for item in items)))
    if all(isinstance(item, VString) for item in items):
        return VString("".join(item.value for item in items))
    raise InvalidInput()


def delete_function(value: Value, stage: str) -> Value:
    """Apply ``del(.key)`` or ``del(.[i, j, ...])`` and return a new value.

    Array indices are removed highest first so earlier removals never shift
    later targets. Indices past the end are ignored.
    """
    target = call_argument(stage)
    if not target.startswith("."):
        raise InvalidInput()

    if "[" not in target and "]" not in target:
        key = target[1:]
        if not isinstance(value, VObject):
            raise DictionaryNotFound()
        if key not in value.entries:
            raise KeyNotFound(key)
        return VObject({k: clone(v) for k, v in value.entries.items() if k != key})

    if not isinstance(value, VArray):
        raise ListNotFound()

    indices = parse_index_list(bracket_content(target))
    items = [clone(v) for v in value.items]
    for index in sorted(set(indices), reverse=True):
        if index < len(items):
            del items[index]
    return VArray(items)


def _as_int(number: int | float) -> int:
    try:
        return int(number)
    except (OverflowError, ValueError):
        raise InvalidInput() from None


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

BUILTINS: dict[str, Callable[[Value, str], Value]] = {
    "add": add_function,
    "length": length_function,
    "del": delete_function,
}


def call_builtin(value: Value, stage: str) -> Value:
    """Dispatch a function-call stage to its builtin."""
    func = BUILTINS.get(function_name(stage))
    if func is None:
        raise InvalidNeedle(stage)
    return func(value, stage)
