# Core type aliases for Crisp's data model.
# Runtime values are plain Python objects where Python already has the right
# shape (float, bool, str) plus a small set of classes under crisp.types for
# the rest (Symbol, Nil, Pair, Closure, Primitive).
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code is data, so this is the same thing viewed from the reader)
SExpression = LispValue

# Evaluator function type: evaluator step handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
