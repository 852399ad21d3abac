"""Value types for jql Core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VArray:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ",".join(str(v) for v in self.items) + "]"


@dataclass
class VObject:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ",".join(f"{k}:{v}" for k, v in self.entries.items()) + "}"


class _Null:
    """Singleton for JSON null."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()

Value = Union[_Null, VBool, VNumber, VString, VArray, VObject]


# ---------------------------------------------------------------------------
# Conversion to and from plain Python JSON data
# ---------------------------------------------------------------------------

def from_python(obj: Any) -> Value:
    """Convert ``json.load`` output into a Value.

    - None → Null
    - bool → VBool (checked before int)
    - int / float → VNumber
    - str → VString
    - list / tuple → VArray
    - dict → VObject (keys must be strings)
    """
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, (list, tuple)):
        return VArray([from_python(item) for item in obj])
    if isinstance(obj, dict):
        entries: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {key!r}")
            entries[key] = from_python(item)
        return VObject(entries)
    raise TypeError(f"cannot convert {type(obj).__name__} to a Value")


def to_python(value: Value) -> Any:
    """Convert a Value back into plain Python JSON data."""
    if isinstance(value, _Null):
        return None
    if isinstance(value, (VBool, VNumber, VString)):
        return value.value
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    if isinstance(value, VObject):
        return {k: to_python(v) for k, v in value.entries.items()}
    raise TypeError(f"not a Value: {value!r}")


def clone(value: Value) -> Value:
    """Return a structurally independent copy of *value*."""
    if isinstance(value, _Null):
        return Null
    if isinstance(value, VBool):
        return VBool(value.value)
    if isinstance(value, VNumber):
        return VNumber(value.value)
    if isinstance(value, VString):
        return VString(value.value)
    if isinstance(value, VArray):
        return VArray([clone(v) for v in value.items])
    if isinstance(value, VObject):
        return VObject({k: clone(v) for k, v in value.entries.items()})
    raise TypeError(f"not a Value: {value!r}")
