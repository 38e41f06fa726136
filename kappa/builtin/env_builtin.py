"""Built-in functions for the kappa runtime environment.

This module defines the numeric, comparison, boolean, string, list and
equivalence primitives, and the `register` helper that installs them into a
root environment. Every primitive takes the evaluated argument list and
checks its own arity and types.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from kappa import LispValue
from kappa.builtin.unpack import UNPACKERS, unpack_bool, unpack_num, unpack_str
from kappa.errors import DefaultError, NumArgs, TypeMismatch
from kappa.types.dotted_list import DottedList
from kappa.types.environment import Environment
from kappa.types.equality import eqv as eqv_values
from kappa.types.primitive import Primitive

_INT64_MOD = 2**64
_INT64_HALF = 2**63


def wrap_int64(n: int) -> int:
    """Wrap an unbounded int into the signed 64-bit range (two's complement)."""
    return (n + _INT64_HALF) % _INT64_MOD - _INT64_HALF


# -------------------------------
# Arithmetic
# -------------------------------
def _nonzero(d: int) -> int:
    if d == 0:
        raise DefaultError("Division by zero")
    return d


def floor_div(a: int, b: int) -> int:
    return a // _nonzero(b)


def floor_mod(a: int, b: int) -> int:
    return a % _nonzero(b)


def quotient(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(_nonzero(b))
    return q if (a < 0) == (b < 0) else -q


def remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * quotient(a, b)


def numeric_binop(op: Callable[[int, int], int]) -> Callable[[list[LispValue]], int]:
    """Left-fold `op` over two or more weakly-typed numeric arguments."""
    def primitive(args: list[LispValue]) -> int:
        if len(args) < 2:
            raise NumArgs(2, args)
        nums = [unpack_num(a) for a in args]
        return reduce(lambda acc, x: wrap_int64(op(acc, x)), nums[1:], nums[0])
    return primitive


# -------------------------------
# Comparisons
# -------------------------------
def bool_binop(
    unpacker: Callable[[LispValue], LispValue],
    op: Callable[[LispValue, LispValue], bool],
) -> Callable[[list[LispValue]], bool]:
    """Binary predicate over two arguments coerced by `unpacker`."""
    def primitive(args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise NumArgs(2, args)
        left = unpacker(args[0])
        right = unpacker(args[1])
        return op(left, right)
    return primitive


def _and(a: bool, b: bool) -> bool:
    return a and b


def _or(a: bool, b: bool) -> bool:
    return a or b


# -------------------------------
# Lists
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    """First element of a non-empty list or dotted list."""
    match args:
        case [list([x, *_])]:
            return x
        case [DottedList([x, *_], _)]:
            return x
        case [bad]:
            raise TypeMismatch("pair", bad)
    raise NumArgs(1, args)


def cdr(args: list[LispValue]) -> LispValue:
    """Everything after the first element.

    - (a b c)   -> (b c); (a) -> ()
    - (a . t)   -> t
    - (a b . t) -> (b . t)
    """
    match args:
        case [DottedList([_], tail)]:
            return tail
        case [DottedList([_, *rest], tail)]:
            return DottedList(rest, tail)
        case [list([_, *rest])]:
            return rest
        case [bad]:
            raise TypeMismatch("pair", bad)
    raise NumArgs(1, args)


def cons(args: list[LispValue]) -> LispValue:
    """Prepend a value to a list; a non-list tail makes a dotted pair."""
    match args:
        case [x, DottedList(heads, tail)]:
            return DottedList([x, *heads], tail)
        case [x, list() as xs]:
            return [x, *xs]
        case [x, y]:
            return DottedList([x], y)
    raise NumArgs(2, args)


# -------------------------------
# Equivalence
# -------------------------------
def eqv(args: list[LispValue]) -> bool:
    """Structural equality without coercion; also bound as eq?."""
    if len(args) != 2:
        raise NumArgs(2, args)
    return eqv_values(args[0], args[1])


def _unpack_equals(a: LispValue, b: LispValue, unpacker) -> bool:
    try:
        return unpacker(a) == unpacker(b)
    except TypeMismatch:
        return False


def _equal_lists(xs: list[LispValue], ys: list[LispValue]) -> bool:
    return len(xs) == len(ys) and all(is_equal(x, y) for x, y in zip(xs, ys))


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Loose equality: element-wise for lists, weak-typed for everything else."""
    match a, b:
        case DottedList(), DottedList():
            return _equal_lists(a.heads, b.heads) and is_equal(a.tail, b.tail)
        case list(), list():
            return _equal_lists(a, b)
    if any(_unpack_equals(a, b, unpacker) for unpacker in UNPACKERS):
        return True
    return eqv_values(a, b)


def equal(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise NumArgs(2, args)
    return is_equal(args[0], args[1])


PRIMITIVES: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": numeric_binop(operator.add),
    "-": numeric_binop(operator.sub),
    "*": numeric_binop(operator.mul),
    "/": numeric_binop(floor_div),
    "mod": numeric_binop(floor_mod),
    "quotient": numeric_binop(quotient),
    "remainder": numeric_binop(remainder),
    "=": bool_binop(unpack_num, operator.eq),
    "<": bool_binop(unpack_num, operator.lt),
    ">": bool_binop(unpack_num, operator.gt),
    "/=": bool_binop(unpack_num, operator.ne),
    ">=": bool_binop(unpack_num, operator.ge),
    "<=": bool_binop(unpack_num, operator.le),
    "&&": bool_binop(unpack_bool, _and),
    "||": bool_binop(unpack_bool, _or),
    "string=?": bool_binop(unpack_str, operator.eq),
    "string<?": bool_binop(unpack_str, operator.lt),
    "string>?": bool_binop(unpack_str, operator.gt),
    "string<=?": bool_binop(unpack_str, operator.le),
    "string>=?": bool_binop(unpack_str, operator.ge),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq?": eqv,
    "eqv?": eqv,
    "equal?": equal,
}


def register(env: Environment) -> None:
    """Install every primitive into `env` as a Primitive value."""
    env.update({name: Primitive(name, fn) for name, fn in PRIMITIVES.items()})
