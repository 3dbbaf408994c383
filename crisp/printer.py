"""Canonical textual form of Crisp values.

`to_string` is the display contract used by the REPL and the CLI: its output
reads back (via crisp.reader) to an equal value for numbers, booleans,
strings, symbols and list structure.
"""

from __future__ import annotations

import math
from io import StringIO

from crisp import LispValue
from crisp.errors import StackExhaustedError
from crisp.types.closure import Closure
from crisp.types.nil import NilType
from crisp.types.pair import Pair
from crisp.types.primitive import Primitive
from crisp.types.symbol import Symbol

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_number(value: float) -> str:
    if math.isnan(value):
        return "+nan.0"
    if math.isinf(value):
        return "+inf.0" if value > 0 else "-inf.0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def quote_string(value: str) -> str:
    return '"' + "".join(ESCAPES.get(ch, ch) for ch in value) + '"'


def _write(value: LispValue, buffer: StringIO, readable: bool) -> None:
    if isinstance(value, Pair):
        buffer.write("(")
        node: LispValue = value
        first = True
        while isinstance(node, Pair):
            if not first:
                buffer.write(" ")
            _write(node.car, buffer, readable)
            first = False
            node = node.cdr
        if not isinstance(node, NilType):
            buffer.write(" . ")
            _write(node, buffer, readable)
        buffer.write(")")
    else:
        buffer.write(_atom_text(value, readable))


def _atom_text(value: LispValue, readable: bool) -> str:
    # bool before float: True/False must never print as numbers
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, NilType):
        return "()"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value) if readable else value
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Closure):
        params = " ".join(str(f) for f in value.formals)
        if value.rest is not None:
            params = f"{params} . {value.rest}" if params else f". {value.rest}"
        return f"#<closure {value.name or 'lambda'} ({params})>"
    if isinstance(value, Primitive):
        return str(value)
    return repr(value)


def _render(value: LispValue, readable: bool) -> str:
    with StringIO() as buffer:
        try:
            _write(value, buffer, readable)
        except RecursionError:
            raise StackExhaustedError("Value nested too deeply to print") from None
        return buffer.getvalue()


def to_string(value: LispValue) -> str:
    """Readable form: strings are quoted and escaped."""
    return _render(value, True)


def display(value: LispValue) -> str:
    """Human form: like to_string, but strings print their raw text."""
    return _render(value, False)
