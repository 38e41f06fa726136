# Core type aliases for kappa's data model.
# Values are plain Python objects where the host already has the right shape
# (int, str, bool, list) plus a few small classes for the rest:
#
#   Atom        -> Symbol
#   List        -> list
#   DottedList  -> DottedList(heads, tail)
#   Number      -> int (signed 64-bit range)
#   String      -> str
#   Bool        -> bool
#   Primitive   -> Primitive / IOPrimitive
#   Closure     -> Closure
#   Port        -> Port
#
# Naming guidance:
# - SExpression: use in reader code and special forms for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]
