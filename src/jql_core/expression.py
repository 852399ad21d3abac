"""Expression scanner: splits a filter into stages and classifies each stage."""

from __future__ import annotations

import re
from enum import Enum, auto

from .errors import MissingBrackets, ParseError

STAGE_SEPARATOR = " | "

_INDEX_RE = re.compile(r"[0-9]+")


class StageKind(Enum):
    IDENTITY = auto()
    FIELD = auto()
    BRACKET = auto()
    FUNCTION = auto()
    INVALID = auto()


class BracketForm(Enum):
    ITERATE = auto()
    SLICE = auto()
    INDEX = auto()


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------

def has_pipe(expression: str) -> bool:
    return STAGE_SEPARATOR in expression


def split_stages(expression: str) -> list[str]:
    """Split *expression* on the literal ``" | "`` separator."""
    return expression.split(STAGE_SEPARATOR)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify(stage: str) -> StageKind:
    """Classify a stage by a structural scan of its text.

    Returns one of:
        IDENTITY — ``.``
        BRACKET  — ``.[...]`` (the first ``[`` and ``]`` are both present)
        FIELD    — ``.key``
        FUNCTION — anything not starting with ``.`` (``length``, ``del(...)``)
        INVALID  — blank stage
    """
    if stage == ".":
        return StageKind.IDENTITY
    if stage.startswith("."):
        if "[" in stage and "]" in stage:
            return StageKind.BRACKET
        return StageKind.FIELD
    if stage.strip():
        return StageKind.FUNCTION
    return StageKind.INVALID


def bracket_content(text: str) -> str:
    """Text between the first ``[`` and the first ``]``.

    Nested brackets are not supported; ``a]b[c`` has no valid pair.
    """
    start = text.find("[")
    end = text.find("]")
    if start < 0 or end < 0 or end < start:
        raise MissingBrackets()
    return text[start + 1:end]


def bracket_form(content: str) -> BracketForm:
    if content == "":
        return BracketForm.ITERATE
    if ":" in content:
        return BracketForm.SLICE
    return BracketForm.INDEX


def function_name(stage: str) -> str:
    """Name part of a function-call stage: ``del(.a)`` → ``del``."""
    return stage.split("(", 1)[0].strip()


def call_argument(stage: str) -> str:
    """Text between the first ``(`` and the first ``)`` of a call stage."""
    start = stage.find("(")
    end = stage.find(")")
    if start < 0 or end < 0 or end < start:
        raise MissingBrackets()
    return stage[start + 1:end].strip()


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def parse_index(text: str) -> int:
    """Parse *text* strictly as a non-negative decimal integer."""
    if not _INDEX_RE.fullmatch(text):
        raise ParseError(text)
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter allows for int conversion
        raise ParseError(text) from None


def parse_slice(content: str) -> tuple[int, int]:
    """Parse ``a:b`` into its two bounds."""
    start, _, end = content.partition(":")
    return parse_index(start), parse_index(end)


def parse_index_list(content: str) -> list[int]:
    """Parse a comma-separated index list such as ``1, 3``."""
    return [parse_index(part.strip()) for part in content.split(",")]
