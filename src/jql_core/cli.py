"""``jql`` command: apply one filter to a JSON document and print the result."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import IO

from .errors import FilterError
from .evaluator import evaluate
from .render import ColorPalette, RenderOptions, write_result
from .values import from_python

logger = logging.getLogger(__name__)

EXIT_USAGE = 2
EXIT_ERROR = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jql", description="Apply a filter expression to a JSON document."
    )
    parser.add_argument("filter", help="filter expression, e.g. '.items | .[] | length'")
    parser.add_argument("file", nargs="?", default=None, help="JSON file (default: stdin)")
    parser.add_argument("-C", "--color-output", action="store_true", help="force colored output")
    parser.add_argument("-M", "--monochrome-output", action="store_true", help="disable colors")
    parser.add_argument("-S", "--sort-keys", action="store_true", help="sort object keys")
    parser.add_argument("--indent", type=int, default=None, help="spaces per level, 0-7 (default 2)")
    parser.add_argument("-c", "--compact-output", action="store_true", help="one line per value")
    parser.add_argument("--debug", action="store_true", help="log each pipeline stage")
    return parser


def options_from_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    env: dict[str, str] | None = None,
    isatty: bool = False,
) -> RenderOptions:
    """Validate flag combinations and build the renderer configuration."""
    if args.color_output and args.monochrome_output:
        parser.error("You can have either colored or monochrome output")
    if args.compact_output and args.indent:
        parser.error("You can have either compact or indented output")
    indent = 2 if args.indent is None else args.indent
    if not 0 <= indent <= 7:
        parser.error(f"The indent value must be in the range of 0-7 inclusive. Current value: {indent}")

    palette = None
    if args.color_output or (isatty and not args.monochrome_output):
        env = os.environ if env is None else env
        try:
            palette = ColorPalette.parse(env.get("JQ_COLORS", ""))
        except ValueError as exc:
            logger.warning("ignoring JQ_COLORS: %s", exc)
            palette = ColorPalette()

    return RenderOptions(
        indent=0 if args.compact_output else indent,
        sort_keys=args.sort_keys,
        compact=args.compact_output,
        palette=palette,
    )


def _read_document(path: str | None, stdin: IO[str]):
    if path is None:
        return json.load(stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = options_from_args(args, parser, isatty=sys.stdout.isatty())

    try:
        document = from_python(_read_document(args.file, sys.stdin))
    except OSError as exc:
        print(f"jql: error: could not open {args.file}: {exc.strerror}", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as exc:
        print(f"jql: error: Failed to read the provided JSON file: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        result = evaluate(document, args.filter)
        write_result(result, options, sys.stdout)
    except FilterError as exc:
        print(f"jql: error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
