from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.modules.loader import Loader
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


def set_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name expr) overwrites an existing binding's cell."""
    if len(expr) != 3 or not isinstance(expr[1], Symbol):
        raise BadSpecialForm("Unrecognized special form", expr)
    _, var_sym, val_expr = expr
    value = evaluate_fn(val_expr, env, loader)
    return env.set(var_sym.name, value)
