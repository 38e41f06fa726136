"""Core evaluator for the kappa interpreter.

Evaluation is direct structural recursion over the value model: literals
evaluate to themselves, symbols are looked up, special forms are dispatched
through SPECIAL_FORMS, and every other non-empty list is an application.
There is no tail-call elimination; deep recursion uses the host stack.
"""

from __future__ import annotations

from kappa import LispValue, SExpression
from kappa.errors import BadSpecialForm, DefaultError, NotFunction
from kappa.evaluation.apply import apply
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.modules.loader import Loader, load
from kappa.types.dotted_list import DottedList
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


def evaluate(
    expr: SExpression, env: Environment, loader: Loader | None = None
) -> LispValue:
    """
    Evaluate `expr` in `env`.

    `loader` supplies the forms for `(load "file")`; it defaults to reading
    the file from disk. Host stack exhaustion surfaces as a DefaultError.
    """
    if loader is None:
        loader = load
    try:
        return evaluate0(expr, env, loader)
    except RecursionError:
        raise DefaultError("Recursion depth exceeded") from None


def evaluate0(expr: SExpression, env: Environment, loader: Loader) -> LispValue:
    """Single evaluation step; errors propagate to the caller unchanged."""
    match expr:
        case bool() | int() | str():
            return expr

        case Symbol():
            return env.lookup(expr.name)

        case DottedList():
            pass

        case list([Symbol() as head, *_]) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](expr, env, loader, evaluate0)

        case list([head, *tail_args]):
            fn = _evaluate_head(head, env, loader)
            args = [evaluate0(arg, env, loader) for arg in tail_args]
            return apply(fn, args, loader, evaluate0)

    raise BadSpecialForm("Unrecognized special form", expr)


def _evaluate_head(head: SExpression, env: Environment, loader: Loader) -> LispValue:
    # An unbound name in operator position is reported as a missing function.
    if isinstance(head, Symbol) and not env.is_bound(head.name):
        raise NotFunction("Unrecognized primitive function args", head.name)
    return evaluate0(head, env, loader)
