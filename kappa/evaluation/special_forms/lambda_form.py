from __future__ import annotations

from typing import Optional

from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.modules.loader import Loader
from kappa.types.dotted_list import DottedList
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Closure
from kappa.types.symbol import Symbol


def parse_params(
    spec: SExpression, form: SExpression
) -> tuple[list[str], Optional[str]]:
    """Split a parameter spec into (positional names, vararg name).

    Accepts ``(a b)``, ``(a b . rest)`` and a bare ``rest`` symbol.
    """
    match spec:
        case Symbol():
            return [], spec.name
        case DottedList(heads, tail):
            names, vararg = heads, tail
        case list():
            names, vararg = spec, None
        case _:
            raise BadSpecialForm("Unrecognized special form", form)

    if not all(isinstance(p, Symbol) for p in names):
        raise BadSpecialForm("Unrecognized special form", form)
    if vararg is not None and not isinstance(vararg, Symbol):
        raise BadSpecialForm("Unrecognized special form", form)
    return [p.name for p in names], (vararg.name if vararg is not None else None)


def make_closure(
    spec: SExpression, body: list[SExpression], env: Environment, form: SExpression
) -> Closure:
    params, vararg = parse_params(spec, form)
    return Closure(params, vararg, list(body), env)


def lambda_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda params body...) captures the current environment."""
    if len(expr) < 2:
        raise BadSpecialForm("Unrecognized special form", expr)
    return make_closure(expr[1], expr[2:], env, expr)
