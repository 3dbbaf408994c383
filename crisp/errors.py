from __future__ import annotations

from typing import Any


class CrispError(Exception):
    """ Base class for all Crisp errors"""
    pass


class CrispSyntaxError(CrispError):
    """ Raised by the reader on malformed source text"""

    def __init__(self, kind: str, message: str, position: int | None = None, text: str | None = None):
        self.kind = kind
        self.position = position
        self.text = text
        where = f" at {position}" if position is not None else ""
        super().__init__(f"{kind}{where}: {message}")


class UnboundSymbolError(CrispError):
    """ Raised when a symbol is used (or set!) before it is bound"""

    def __init__(self, name: Any, message: str | None = None):
        self.name = name
        super().__init__(message or f"Unbound symbol: {name}")


class ArityError(CrispError):
    """ Raised when the number of arguments passed to a procedure or special form is incorrect"""


class CrispTypeError(CrispError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""


class DivisionByZeroError(CrispError):
    """ Raised on division or modulo by zero"""


class NotCallableError(CrispError):
    """ Raised when application is attempted on a value that is not a procedure"""

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        super().__init__(message or f"Not callable: {value!r}")


class StackExhaustedError(CrispError):
    """ Raised when evaluation recurses deeper than the host stack allows"""
