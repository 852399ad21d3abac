"""FilterRepl — interactive filter shell over one loaded document.

Also provides the ``jql-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

from .errors import FilterError
from .evaluator import evaluate
from .render import RenderOptions, render_value, write_result
from .result import FilterResult
from .values import Null, Value, clone, from_python

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# FilterRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class FilterRepl:
    """Holds a document and evaluates filters against it.

    Usage::

        repl = FilterRepl()
        repl.load({"a": [1, 2, 3]})
        repl.eval(".a | length")   # → Single(VNumber(3))
        repl.reset()               # back to null
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.document: Value = Null
        self.options = options or RenderOptions()

    def load(self, obj: Any) -> None:
        """Replace the document with plain Python JSON data."""
        self.document = from_python(obj)

    def load_file(self, path: str) -> None:
        with open(path, encoding="utf-8") as fh:
            self.load(json.load(fh))
        logger.debug("loaded document from %s", path)

    def eval(self, expression: str) -> FilterResult:
        """Evaluate *expression* on a private copy of the document."""
        return evaluate(clone(self.document), expression)

    def reset(self) -> None:
        self.document = Null


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _eval_expr(repl: FilterRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and print each produced value to *dest*."""
    try:
        result = repl.eval(expr)
        write_result(result, repl.options, dest)
    except FilterError as exc:
        print(f"error: {exc}", file=dest)


def _show_doc(repl: FilterRepl, dest: IO[str]) -> None:
    print(render_value(repl.document, repl.options), file=dest)


def _toggle_sort(repl: FilterRepl, dest: IO[str]) -> None:
    o = repl.options
    repl.options = RenderOptions(
        indent=o.indent, sort_keys=not o.sort_keys, compact=o.compact, palette=o.palette
    )
    state = "on" if repl.options.sort_keys else "off"
    print(f"  sort keys: {state}", file=dest)


def _process_line(repl: FilterRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":doc":
        _show_doc(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    if line == ":sort":
        _toggle_sort(repl, dest)
        return True

    if line.startswith(":load "):
        filepath = line[6:].strip()
        try:
            repl.load_file(filepath)
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        except ValueError as exc:
            print(f"Invalid JSON in '{filepath}': {exc}", file=sys.stderr)
        return True

    # ── Filter expression ─────────────────────────────────────────────────
    _eval_expr(repl, line, dest)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Interactive filter shell (``jql-repl`` / ``python -m jql_core.repl``)."""
    repl = FilterRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    args = sys.argv[1:] if argv is None else argv
    if args:
        _process_line(repl, f":load {args[0]}", dest)

    print("jql REPL  (:q to quit  |  :load <file>  :doc  :sort  :reset  |  <filter>)")

    while True:
        try:
            line = input("jql> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> "):
            filepath = line[4:].strip()
            try:
                new_file = open(filepath, "w", encoding="utf-8")
            except OSError as exc:
                # keep writing to the current destination
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
                continue
            if _file:
                _file.close()
            _file = dest = new_file
            continue

        if line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
