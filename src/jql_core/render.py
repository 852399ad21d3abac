"""Renderer — turns a FilterResult into text.

Presentation only: reads ``Single`` / ``Sequence`` and the Value variants,
never changes them. Colors come in through an explicit ``ColorPalette``.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from typing import IO

from .result import FilterResult, Sequence, Single
from .values import Value, VArray, VBool, VNumber, VObject, VString, _Null

ESC = "\x1b["
RESET = "\x1b[0m"

PALETTE_SLOTS = ("null", "false", "true", "number", "string", "array", "object", "key")
DEFAULT_COLORS = "0;90:0;39:0;39:0;39:0;32:1;39:1;39:34;1"

_SGR_RE = re.compile(r"[0-9]+(;[0-9]+)*")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColorPalette:
    """SGR parameter strings per kind, in ``PALETTE_SLOTS`` order."""

    codes: tuple[str, ...] = tuple(DEFAULT_COLORS.split(":"))

    @classmethod
    def parse(cls, text: str) -> "ColorPalette":
        """Build a palette from a ``JQ_COLORS``-style string.

        Entries are colon separated; missing trailing entries keep their
        defaults. Raises ``ValueError`` on a malformed entry.
        """
        codes = list(DEFAULT_COLORS.split(":"))
        parts = text.split(":") if text else []
        if len(parts) > len(PALETTE_SLOTS):
            raise ValueError(f"too many color entries: {len(parts)}")
        for i, part in enumerate(parts):
            if not _SGR_RE.fullmatch(part):
                raise ValueError(f"invalid color entry {part!r}")
            codes[i] = part
        return cls(tuple(codes))

    def code_for(self, slot: str) -> str:
        return self.codes[PALETTE_SLOTS.index(slot)]


@dataclass(frozen=True)
class RenderOptions:
    indent: int = 2
    sort_keys: bool = False
    compact: bool = False
    palette: ColorPalette | None = field(default=None)

    def __post_init__(self) -> None:
        if not 0 <= self.indent <= 7:
            raise ValueError(f"indent must be in 0..7, got {self.indent}")

    @property
    def single_line(self) -> bool:
        return self.compact or self.indent == 0


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_value(value: Value, options: RenderOptions | None = None) -> str:
    return _render(value, options or RenderOptions(), 0)


def render_result(result: FilterResult, options: RenderOptions | None = None) -> list[str]:
    """One rendered string per value produced by *result*."""
    options = options or RenderOptions()
    if isinstance(result, Single):
        return [render_value(result.value, options)]
    if isinstance(result, Sequence):
        return [render_value(v, options) for v in result]
    raise TypeError(f"not a FilterResult: {result!r}")


def write_result(result: FilterResult, options: RenderOptions, dest: IO[str]) -> None:
    for line in render_result(result, options):
        print(line, file=dest)


def _paint(text: str, slot: str, options: RenderOptions) -> str:
    if options.palette is None:
        return text
    return f"{ESC}{options.palette.code_for(slot)}m{text}{RESET}"


def _fmt_number(value: int | float) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return "null"
        if value.is_integer() and abs(value) < 1e17:
            return str(int(value))
    return str(value)


def _render(value: Value, options: RenderOptions, depth: int) -> str:
    if isinstance(value, _Null):
        return _paint("null", "null", options)
    if isinstance(value, VBool):
        text = "true" if value.value else "false"
        return _paint(text, text, options)
    if isinstance(value, VNumber):
        return _paint(_fmt_number(value.value), "number", options)
    if isinstance(value, VString):
        return _paint(json.dumps(value.value, ensure_ascii=False), "string", options)
    if isinstance(value, VArray):
        parts = [_render(v, options, depth + 1) for v in value.items]
        return _container(parts, "[", "]", "array", options, depth)
    if isinstance(value, VObject):
        keys = list(value.entries)
        if options.sort_keys:
            keys.sort()
        sep = ":" if options.single_line else ": "
        parts = [
            _paint(json.dumps(k, ensure_ascii=False), "key", options)
            + _paint(sep, "object", options)
            + _render(value.entries[k], options, depth + 1)
            for k in keys
        ]
        return _container(parts, "{", "}", "object", options, depth)
    raise TypeError(f"not a Value: {value!r}")


def _container(
    parts: list[str],
    open_: str,
    close: str,
    slot: str,
    options: RenderOptions,
    depth: int,
) -> str:
    if not parts:
        return _paint(open_ + close, slot, options)
    comma = _paint(",", slot, options)
    if options.single_line:
        return _paint(open_, slot, options) + comma.join(parts) + _paint(close, slot, options)
    inner = " " * (options.indent * (depth + 1))
    outer = " " * (options.indent * depth)
    body = (comma + "\n").join(inner + p for p in parts)
    return _paint(open_, slot, options) + "\n" + body + "\n" + outer + _paint(close, slot, options)
