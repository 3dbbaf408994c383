from crisp.types.symbol import Symbol
from crisp.types.nil import Nil, NilType
from crisp.types.pair import Pair, make_list, to_list, is_list, equal
from crisp.types.environment import Environment
from crisp.types.closure import Closure
from crisp.types.primitive import Primitive

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "make_list",
    "to_list",
    "is_list",
    "equal",
    "Environment",
    "Closure",
    "Primitive",
]
