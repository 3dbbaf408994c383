"""Interactive read-eval-print loop.

Lines are buffered until their parentheses balance, then the buffer is handed
to the interpreter; each result (or error) is printed and the loop continues.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from crisp import config
from crisp.errors import CrispError
from crisp.interpreter import Interpreter
from crisp.printer import to_string

logger = logging.getLogger(__name__)


def paren_balance(text: str) -> int:
    """Open minus close parens, ignoring those inside strings and comments."""
    depth = 0
    in_string = False
    escaped = False
    in_comment = False
    for ch in text:
        if in_comment:
            if ch == "\n":
                in_comment = False
        elif in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == ";":
            in_comment = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    return depth


def run_repl(
    interpreter: Interpreter | None = None,
    input_fn: Callable[[str], str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    if input_fn is None:
        try:
            # Line editing and history for the interactive prompt
            import readline as _  # noqa: F401
        except ImportError:
            pass
        input_fn = input
    out = out or sys.stdout
    err = err or sys.stderr
    interpreter = interpreter or Interpreter()
    prompt = config.get_prompt()
    continuation = config.get_continuation_prompt()
    buffer: list[str] = []

    while True:
        try:
            line = input_fn(continuation if buffer else prompt)
        except EOFError:
            print(file=out)
            return 0
        except KeyboardInterrupt:
            # Drop the partial input and start over
            print(file=out)
            buffer.clear()
            continue

        buffer.append(line)
        source = "\n".join(buffer)
        if not source.strip():
            buffer.clear()
            continue
        if paren_balance(source) > 0:
            continue
        buffer.clear()

        for _, result in interpreter.eval_forms(source):
            if isinstance(result, CrispError):
                logger.debug("repl error: %r", result)
                print(f"Error: {result}", file=err)
            else:
                try:
                    print(to_string(result), file=out)
                except CrispError as e:
                    print(f"Error: {e}", file=err)
