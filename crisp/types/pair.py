"""Cons cells and list helpers.

A list is a chain of Pairs terminated by Nil; any other terminator makes the
chain an improper (dotted) list.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from crisp import LispValue
from crisp.errors import CrispTypeError
from crisp.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Yield each element of a proper list."""
        node: LispValue = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr
        if node is not Nil:
            raise CrispTypeError(f"Expected a proper list, found dotted tail {node!r}")

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pair) and equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from crisp.printer import to_string
        return to_string(self)


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a Pair chain from `items`, terminated by `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def is_list(value: LispValue) -> bool:
    """True for Nil and for Pair chains terminated by Nil."""
    while isinstance(value, Pair):
        value = value.cdr
    return value is Nil


def to_list(value: LispValue) -> list[LispValue]:
    """Convert a proper list (or Nil) to a Python list."""
    if value is Nil:
        return []
    if not isinstance(value, Pair):
        raise CrispTypeError(f"Expected a list, got {value!r}")
    return list(value)


def atoms_equal(a: LispValue, b: LispValue) -> bool:
    # bool is an int subclass and 1.0 == True in Python; the language keeps them apart
    if type(a) is not type(b):
        return False
    return a == b


def equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; walks cdr chains iteratively."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    return atoms_equal(a, b)
