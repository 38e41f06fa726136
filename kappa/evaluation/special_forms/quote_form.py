from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.modules.loader import Loader
from kappa.types.environment import Environment


def quote_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote datum) returns datum unevaluated."""
    if len(expr) != 2:
        raise BadSpecialForm("Unrecognized special form", expr)
    return expr[1]
