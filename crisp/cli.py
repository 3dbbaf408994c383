"""Crisp entry point: run a source file, a single expression, or the REPL."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from crisp import __version__, config
from crisp.errors import CrispError
from crisp.interpreter import Interpreter
from crisp.printer import to_string
from crisp.repl import run_repl

logger = logging.getLogger(__name__)


def _safe_text(form) -> str:
    try:
        return to_string(form)
    except CrispError:
        return "<form too deep to print>"


def _report(results, source_name: str) -> int:
    """Print the last successful value; report every error. Returns the exit status."""
    status = 0
    last = None
    for form, result in results:
        if isinstance(result, CrispError):
            status = 1
            where = f" in {_safe_text(form)}" if form is not None else ""
            print(f"{source_name}: Error{where}: {result}", file=sys.stderr)
        else:
            last = result
    if last is not None:
        try:
            print(to_string(last))
        except CrispError as exc:
            print(f"{source_name}: Error: {exc}", file=sys.stderr)
            status = 1
    return status


def run_cli(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="crisp", description="Crisp Lisp interpreter")
    parser.add_argument("file", nargs="?", help="Source file to evaluate; starts the REPL when omitted")
    parser.add_argument("-e", "--eval", dest="expr", help="Evaluate the given expression text and print the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Host recursion limit (default: $CRISP_RECURSION_LIMIT or 5000)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    if args.expr is not None and args.file is not None:
        parser.error("give either a file or -e EXPR, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    limit = args.recursion_limit or config.get_recursion_limit()
    sys.setrecursionlimit(limit)
    logger.debug("recursion limit set to %d", sys.getrecursionlimit())

    interpreter = Interpreter()

    if args.expr is not None:
        return _report(interpreter.eval_forms(args.expr), "<expr>")

    if args.file is not None:
        try:
            results = interpreter.load_file(args.file)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Failed to read {args.file}: {exc}", file=sys.stderr)
            return 1
        return _report(results, args.file)

    return run_repl(interpreter)


def main() -> None:
    raise SystemExit(run_cli())
