from __future__ import annotations
import sys


class Symbol:
    """
    An identifier read from source text, such as `x`, `+` or `list->string`.

    Symbols are case-sensitive and compare by name. The name is interned,
    so the `id` strings of two equal symbols are the same object. A symbol
    prints as its bare name; `(quote x)` is how code refers to one as data.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
