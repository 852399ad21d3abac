"""Evaluator: runs a filter expression against a document value."""

from __future__ import annotations

import logging

from .errors import InvalidNeedle
from .expression import StageKind, classify, has_pipe, split_stages
from .functions import call_builtin
from .result import FilterResult, Sequence, Single
from .selectors import select_bracket, select_field, select_identity
from .values import Value, VArray

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(document: Value, expression: str) -> FilterResult:
    """Evaluate *expression* against *document*.

    Returns ``Single`` or ``Sequence``; raises a ``FilterError`` subclass on
    the first failing stage.
    """
    if not has_pipe(expression):
        return evaluate_stage(document, expression)
    return _eval_pipeline(document, split_stages(expression))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def _eval_pipeline(document: Value, stages: list[str]) -> FilterResult:
    current: Value = document
    i = 0
    while i < len(stages):
        stage = stages[i]
        logger.debug("stage %d/%d: %r", i + 1, len(stages), stage)
        result = evaluate_stage(current, stage)

        if isinstance(result, Single):
            current = result.value
            i += 1
            continue

        if isinstance(result, Sequence):
            if i + 1 == len(stages):
                # Fan-out reaches the caller only from the last stage
                return result
            current = _flatten(result, stages[i + 1])
            i += 2
            continue

        raise TypeError(f"unexpected stage result: {result!r}")

    return Single(current)


def _flatten(sequence: Sequence, stage: str) -> VArray:
    """Apply *stage* to every element and collect the outcomes in one array."""
    collected: list[Value] = []
    for item in sequence:
        result = evaluate_stage(item, stage)
        if isinstance(result, Single):
            collected.append(result.value)
        elif isinstance(result, Sequence):
            collected.extend(result)
        else:
            raise TypeError(f"unexpected stage result: {result!r}")
    logger.debug("flattened %d value(s) through %r", len(collected), stage)
    return VArray(collected)


# ---------------------------------------------------------------------------
# Per-stage evaluation
# ---------------------------------------------------------------------------

def evaluate_stage(value: Value, stage: str) -> FilterResult:
    kind = classify(stage)
    if kind is StageKind.IDENTITY:
        return select_identity(value)
    if kind is StageKind.BRACKET:
        return select_bracket(value, stage)
    if kind is StageKind.FIELD:
        return select_field(value, stage)
    if kind is StageKind.FUNCTION:
        return Single(call_builtin(value, stage))
    raise InvalidNeedle(stage)
