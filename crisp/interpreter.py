from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from crisp import SExpression, LispValue
from crisp.builtins import make_root_env
from crisp.errors import CrispError
from crisp.evaluation.evaluator import evaluate
from crisp.printer import to_string
from crisp.reader.parser import lex, TokenStream
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.pair import make_list
from crisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Crisp code.
    Maintains one root Environment across calls, so definitions persist
    between REPL inputs or across the forms of a file.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else make_root_env()

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value (Nil when empty)."""
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("eval %s", to_string(expr))
            result = evaluate(expr, self.env)
        return result

    def eval_forms(self, code: str) -> Iterator[tuple[SExpression | None, LispValue | CrispError]]:
        """Evaluate top-level forms one at a time, yielding (form, value-or-error).

        An evaluation error is yielded and the next form still runs. A reader
        error is yielded with form None and ends the iteration, since the
        reader cannot resynchronise after malformed text.
        """
        stream = TokenStream(lex(code))
        while True:
            try:
                expr = stream.parse_expr()
            except CrispError as e:
                logger.debug("read error: %s", e)
                yield None, e
                return
            if expr is None:
                return
            try:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("eval %s", to_string(expr))
                yield expr, evaluate(expr, self.env)
            except CrispError as e:
                logger.debug("eval error: %s", e)
                yield expr, e

    def load_file(self, path: str | Path) -> list[tuple[SExpression | None, LispValue | CrispError]]:
        """Read a UTF-8 source file and evaluate each of its forms in this interpreter."""
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("loading %s (%d chars)", path, len(source))
        return list(self.eval_forms(source))


def run_program(code: str, env: Environment | None = None) -> LispValue:
    """Evaluate a whole source unit as a single (begin ...) form.

    All forms share one environment, and the first error aborts the unit.
    """
    if env is None:
        env = make_root_env()
    forms = list(TokenStream(lex(code)).parse_all())
    return evaluate(make_list([Symbol("begin"), *forms]), env)
