"""
  Crisp Reader: Lexer and Parser

- Streaming, lazy parsing: `lex` is a generator and `TokenStream` pulls
  tokens on demand, so a source unit holding many top-level forms is read
  one form at a time.
- Emits runtime values directly (code is data):

    - numbers -> float (including +inf.0, -inf.0 and +nan.0)
    - true / false -> bool
    - nil and () -> Nil
    - strings -> str
    - symbols -> Symbol
    - lists -> Pair chains terminated by Nil
    - dotted lists (a . b) -> Pair chains with a non-Nil tail
    - 'expr -> (quote expr)
"""

from __future__ import annotations

import math
import re
from typing import Iterator, NamedTuple, Optional

from crisp import SExpression
from crisp.errors import CrispSyntaxError, StackExhaustedError
from crisp.types.nil import Nil
from crisp.types.pair import make_list
from crisp.types.symbol import Symbol

UNTERMINATED_LIST = "UnterminatedList"
UNEXPECTED_CLOSE_PAREN = "UnexpectedCloseParen"
MALFORMED_TOKEN = "MalformedToken"

TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # 'expr shorthand
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>"(?:\\.|[^\\"])*\Z)'  # string running into end of input
    r'|(?P<atom>[^\s()\'";]+)',  # numbers, booleans, symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
}

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}

# Printed forms of the non-finite floats, see crisp.printer.format_number
SPECIAL_FLOATS: dict[str, float] = {
    "+inf.0": math.inf,
    "-inf.0": -math.inf,
    "+nan.0": math.nan,
}


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos), skipping whitespace and comments."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise CrispSyntaxError(
                MALFORMED_TOKEN, f"Unexpected character {source[pos]!r}", pos, source[pos:]
            )
        kind = m.lastgroup
        if kind == "open_string":
            raise CrispSyntaxError(MALFORMED_TOKEN, "Unterminated string literal", pos, m.group())
        if kind not in ("whitespace", "comment"):
            yield Token(kind, m.group(), pos)
        pos = m.end()


def decode_string(token: Token) -> str:
    """Strip the quotes from a string token and resolve its escape sequences."""
    body = token.text[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            esc = body[i + 1]  # the lexer guarantees a character follows
            if esc not in STRING_ESCAPES:
                raise CrispSyntaxError(
                    MALFORMED_TOKEN, f"Unknown escape sequence \\{esc}", token.pos + 1 + i, token.text
                )
            out.append(STRING_ESCAPES[esc])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def parse_atom(text: str) -> SExpression:
    """Classify an atom token: number, then boolean, then nil, otherwise symbol."""
    if NUMBER_RE.fullmatch(text):
        return float(text)
    if text in SPECIAL_FLOATS:
        return SPECIAL_FLOATS[text]
    if text in BOOLEANS:
        return BOOLEANS[text]
    if text == "nil":
        return Nil
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next expression; returns None at end of input."""
        try:
            return self._parse_expr()
        except RecursionError:
            raise StackExhaustedError("Expression nested too deeply to read") from None

    def _parse_expr(self) -> Optional[SExpression]:
        token = self.advance()
        if token is None:
            return None

        if token.kind == "lparen":
            return self._parse_list(token)

        if token.kind == "rparen":
            raise CrispSyntaxError(UNEXPECTED_CLOSE_PAREN, "Unexpected ')'", token.pos, token.text)

        if token.kind == "quote":
            nxt = self.peek()
            if nxt is None or nxt.kind == "rparen":
                raise CrispSyntaxError(MALFORMED_TOKEN, "Nothing to quote after '", token.pos, token.text)
            return make_list([QUOTE_FORMS[token.text], self._parse_expr()])

        if token.kind == "string":
            return decode_string(token)

        if token.text == ".":
            raise CrispSyntaxError(MALFORMED_TOKEN, "Unexpected '.' outside a list", token.pos, token.text)
        return parse_atom(token.text)

    def _parse_list(self, open_token: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            token = self.peek()
            if token is None:
                raise CrispSyntaxError(UNTERMINATED_LIST, "Missing ')'", open_token.pos, open_token.text)
            if token.kind == "rparen":
                self.advance()
                return make_list(items)
            if token.kind == "atom" and token.text == ".":
                self.advance()
                if not items:
                    raise CrispSyntaxError(MALFORMED_TOKEN, "Dotted list needs a head", token.pos, token.text)
                nxt = self.peek()
                if nxt is None:
                    raise CrispSyntaxError(UNTERMINATED_LIST, "Missing ')'", open_token.pos, open_token.text)
                if nxt.kind == "rparen":
                    raise CrispSyntaxError(MALFORMED_TOKEN, "Dotted list needs a tail", token.pos, token.text)
                tail = self._parse_expr()
                close = self.peek()
                if close is None:
                    raise CrispSyntaxError(UNTERMINATED_LIST, "Missing ')'", open_token.pos, open_token.text)
                if close.kind != "rparen":
                    raise CrispSyntaxError(
                        MALFORMED_TOKEN, "Expected ')' after dotted tail", close.pos, close.text
                    )
                self.advance()
                return make_list(items, tail)
            items.append(self._parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise CrispSyntaxError(MALFORMED_TOKEN, "No expression to read", 0, source)
    extra = stream.peek()
    if extra is not None:
        raise CrispSyntaxError(MALFORMED_TOKEN, "Unexpected text after expression", extra.pos, extra.text)
    return expr


__all__ = ["Token", "TokenStream", "lex", "read", "read_all", "parse_atom", "decode_string"]
