from kappa.types.symbol import Symbol
from kappa.types.dotted_list import DottedList
from kappa.types.environment import Cell, Environment
from kappa.types.primitive import Primitive, IOPrimitive
from kappa.types.lambda_fn import Closure
from kappa.types.port import Port

__all__ = [
    "Symbol",
    "DottedList",
    "Cell",
    "Environment",
    "Primitive",
    "IOPrimitive",
    "Closure",
    "Port",
]
