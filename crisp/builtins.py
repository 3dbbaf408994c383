from __future__ import annotations
from typing import Any
from crisp.types import Environment, Nil, NilType, Pair, Primitive, Closure, Symbol, equal, is_list, make_list
from crisp.types.pair import atoms_equal
from crisp.errors import CrispTypeError, DivisionByZeroError
from crisp.evaluation.special_forms.if_form import is_truthy
from crisp.printer import display as display_text, to_string

# Arity is declared on each Primitive and enforced by the evaluator before the
# call, so the functions below can index `args` without re-checking counts.


def _numbers(name: str, args: list[Any]) -> list[float]:
    for arg in args:
        if not isinstance(arg, float):
            raise CrispTypeError(f"{name} expects numbers, got {to_string(arg)}")
    return args

# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Any]) -> float:
    return sum(_numbers("+", args), 0.0)

def sub(env: Environment, args: list[Any]) -> float:
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result

def mul(env: Environment, args: list[Any]) -> float:
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result

def div(env: Environment, args: list[Any]) -> float:
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = [1.0] + nums
    result = nums[0]
    for x in nums[1:]:
        if x == 0.0:
            raise DivisionByZeroError(f"Division by zero: {to_string(make_list([Symbol('/'), *args]))}")
        result /= x
    return result

def mod(env: Environment, args: list[Any]) -> float:
    a, b = _numbers("mod", args)
    if b == 0.0:
        raise DivisionByZeroError(f"Modulo by zero: (mod {to_string(a)} {to_string(b)})")
    return a % b

# -------------------------------
# Comparison
# -------------------------------
def num_eq(env: Environment, args: list[Any]) -> bool:
    nums = _numbers("=", args)
    return all(a == b for a, b in zip(nums, nums[1:]))

def lt(env: Environment, args: list[Any]) -> bool:
    nums = _numbers("<", args)
    return all(a < b for a, b in zip(nums, nums[1:]))

def lte(env: Environment, args: list[Any]) -> bool:
    nums = _numbers("<=", args)
    return all(a <= b for a, b in zip(nums, nums[1:]))

def gt(env: Environment, args: list[Any]) -> bool:
    nums = _numbers(">", args)
    return all(a > b for a, b in zip(nums, nums[1:]))

def gte(env: Environment, args: list[Any]) -> bool:
    nums = _numbers(">=", args)
    return all(a >= b for a, b in zip(nums, nums[1:]))

# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: list[Any]) -> Any:
    result: Any = True
    for arg in args:
        if not is_truthy(arg):
            return False
        result = arg
    return result

def logical_or(env: Environment, args: list[Any]) -> Any:
    for arg in args:
        if is_truthy(arg):
            return arg
    return False

def logical_not(env: Environment, args: list[Any]) -> bool:
    return not is_truthy(args[0])

# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[Any]) -> Pair:
    head, tail = args
    return Pair(head, tail)

def car(env: Environment, args: list[Any]) -> Any:
    value = args[0]
    if value is Nil:
        return Nil
    if not isinstance(value, Pair):
        raise CrispTypeError(f"car expects a pair, got {to_string(value)}")
    return value.car

def cdr(env: Environment, args: list[Any]) -> Any:
    value = args[0]
    if value is Nil:
        return Nil
    if not isinstance(value, Pair):
        raise CrispTypeError(f"cdr expects a pair, got {to_string(value)}")
    return value.cdr

def list_builtin(env: Environment, args: list[Any]) -> Any:
    return make_list(args)

def length(env: Environment, args: list[Any]) -> float:
    value = args[0]
    if not is_list(value):
        raise CrispTypeError(f"length expects a proper list, got {to_string(value)}")
    return float(len(value))

def is_null(env: Environment, args: list[Any]) -> bool:
    return args[0] is Nil

def is_pair(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], Pair)

# -------------------------------
# Predicates and equality
# -------------------------------
def is_number(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], float)

def is_symbol(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], Symbol)

def is_string(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], str)

def is_boolean(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], bool)

def is_procedure(env: Environment, args: list[Any]) -> bool:
    return isinstance(args[0], (Closure, Primitive))

def is_eq(env: Environment, args: list[Any]) -> bool:
    a, b = args
    if isinstance(a, (float, bool, str, Symbol, NilType)):
        return atoms_equal(a, b)
    return a is b

def is_equal(env: Environment, args: list[Any]) -> bool:
    a, b = args
    return equal(a, b)

# -------------------------------
# Output
# -------------------------------
def display(env: Environment, args: list[Any]) -> Any:
    print(" ".join(display_text(arg) for arg in args))
    return Nil

# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: list[Primitive] = [
    Primitive("+", add, 0),
    Primitive("-", sub, 1),
    Primitive("*", mul, 0),
    Primitive("/", div, 1),
    Primitive("mod", mod, 2, 2),
    Primitive("=", num_eq, 1),
    Primitive("<", lt, 1),
    Primitive("<=", lte, 1),
    Primitive(">", gt, 1),
    Primitive(">=", gte, 1),
    Primitive("and", logical_and, 0),
    Primitive("or", logical_or, 0),
    Primitive("not", logical_not, 1, 1),
    Primitive("cons", cons, 2, 2),
    Primitive("car", car, 1, 1),
    Primitive("first", car, 1, 1),
    Primitive("cdr", cdr, 1, 1),
    Primitive("rest", cdr, 1, 1),
    Primitive("list", list_builtin, 0),
    Primitive("length", length, 1, 1),
    Primitive("null?", is_null, 1, 1),
    Primitive("pair?", is_pair, 1, 1),
    Primitive("number?", is_number, 1, 1),
    Primitive("symbol?", is_symbol, 1, 1),
    Primitive("string?", is_string, 1, 1),
    Primitive("boolean?", is_boolean, 1, 1),
    Primitive("procedure?", is_procedure, 1, 1),
    Primitive("eq?", is_eq, 2, 2),
    Primitive("equal?", is_equal, 2, 2),
    Primitive("display", display, 0),
]


def register(env: Environment) -> None:
    env.update({Symbol(p.name): p for p in PRIMITIVES})


def make_root_env() -> Environment:
    """Fresh root Environment pre-populated with the primitive library."""
    env = Environment()
    register(env)
    return env
