import math

import pytest

from crisp.builtins import make_root_env
from crisp.errors import StackExhaustedError
from crisp.printer import display, to_string
from crisp.reader.parser import read
from crisp.types import Closure, Nil, Pair, Symbol, make_list


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "()"),
        (True, "true"),
        (False, "false"),
        (7.0, "7"),
        (-3.0, "-3"),
        (0.0, "0"),
        (3.5, "3.5"),
        (0.1, "0.1"),
        (1e20, "1e+20"),
        (float("inf"), "+inf.0"),
        (float("-inf"), "-inf.0"),
        (float("nan"), "+nan.0"),
        (Symbol("foo"), "foo"),
        ("hello", '"hello"'),
        ('say "hi"\n', '"say \\"hi\\"\\n"'),
        ("back\\slash\t", '"back\\\\slash\\t"'),
        (make_list([1.0, 2.0, 3.0]), "(1 2 3)"),
        (make_list([Symbol("a"), make_list([Symbol("b"), "c"]), Nil]), '(a (b "c") ())'),
        (Pair(1.0, 2.0), "(1 . 2)"),
        (make_list([1.0, 2.0], 3.0), "(1 2 . 3)"),
        (make_list([Symbol("quote"), Symbol("x")]), "(quote x)"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_display_leaves_strings_raw():
    assert display("hi there") == "hi there"
    assert display(make_list(["a", 1.0])) == "(a 1)"


def test_procedures_print_opaquely():
    env = make_root_env()
    assert to_string(env.lookup(Symbol("+"))) == "#<primitive +>"
    lam = Closure([Symbol("x"), Symbol("y")], Nil, env)
    assert to_string(lam) == "#<closure lambda (x y)>"
    variadic = Closure([Symbol("x")], Nil, env, rest=Symbol("more"), name="f")
    assert to_string(variadic) == "#<closure f (x . more)>"
    assert to_string(Closure([], Nil, env, rest=Symbol("args"))) == "#<closure lambda (. args)>"


def test_str_of_values_matches_printer():
    assert str(make_list([1.0, Symbol("b")])) == "(1 b)"
    assert str(Nil) == "()"


@pytest.mark.parametrize("source", ["(1 2.5 -3)", '(a "b\\n" (c . d) ())', "(quote (true false))", "x"])
def test_reprint_is_stable(source):
    assert to_string(read(to_string(read(source)))) == to_string(read(source))


def test_overflowed_product_reads_back_as_infinity(run):
    value = run("(* 1e308 10)")
    assert value == math.inf
    assert read(to_string(value)) == math.inf
    assert run("(- 0 (* 1e308 10))") == -math.inf
    assert read(to_string(-math.inf)) == -math.inf


def test_nan_reads_back_as_nan():
    value = read(to_string(math.nan))
    assert isinstance(value, float)
    assert math.isnan(value)


def test_too_deep_value_raises_stack_exhausted():
    value = Nil
    for _ in range(20000):
        value = Pair(value, Nil)
    with pytest.raises(StackExhaustedError):
        to_string(value)
