"""Structural equality (``eqv?``) over kappa values."""

from __future__ import annotations

from kappa import LispValue
from kappa.types.dotted_list import DottedList
from kappa.types.lambda_fn import Closure
from kappa.types.symbol import Symbol


def eqv(a: LispValue, b: LispValue) -> bool:
    """Return True if `a` and `b` are the same value.

    Data values compare by structure; primitives and ports by identity;
    closures by parameters, body and captured environment.
    """
    if a is b:
        return True
    match a, b:
        case bool(), bool():
            return a is b
        case (bool(), _) | (_, bool()):
            # keep True/1 and False/0 apart
            return False
        case int(), int():
            return a == b
        case str(), str():
            return a == b
        case Symbol(), Symbol():
            return a == b
        case DottedList(), DottedList():
            return _eqv_list(a.heads, b.heads) and eqv(a.tail, b.tail)
        case list(), list():
            return _eqv_list(a, b)
        case Closure(), Closure():
            return (
                a.params == b.params
                and a.vararg == b.vararg
                and _eqv_list(a.body, b.body)
                and a.env == b.env
            )
    return False


def _eqv_list(xs: list[LispValue], ys: list[LispValue]) -> bool:
    return len(xs) == len(ys) and all(eqv(x, y) for x, y in zip(xs, ys))
