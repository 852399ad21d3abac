"""jql Core — filter evaluation engine for JSON-like values."""

from .evaluator import evaluate
from .values import (
    Null,
    Value,
    VArray,
    VBool,
    VNumber,
    VObject,
    VString,
    _Null,
    clone,
    from_python,
    to_python,
)
from .result import FilterResult, Sequence, Single
from .errors import (
    FilterError,
    DictionaryNotFound,
    IndexOutOfBounds,
    InvalidInput,
    InvalidNeedle,
    KeyNotFound,
    ListNotFound,
    MissingBrackets,
    ParseError,
)
from .render import ColorPalette, RenderOptions, render_result, render_value
from .repl import FilterRepl

__all__ = [
    "evaluate",
    "Null",
    "Value",
    "VArray",
    "VBool",
    "VNumber",
    "VObject",
    "VString",
    "clone",
    "from_python",
    "to_python",
    "FilterResult",
    "Sequence",
    "Single",
    "FilterError",
    "DictionaryNotFound",
    "IndexOutOfBounds",
    "InvalidInput",
    "InvalidNeedle",
    "KeyNotFound",
    "ListNotFound",
    "MissingBrackets",
    "ParseError",
    "ColorPalette",
    "RenderOptions",
    "render_result",
    "render_value",
    "FilterRepl",
]
