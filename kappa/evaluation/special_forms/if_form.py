from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.modules.loader import Loader
from kappa.types.environment import Environment


def if_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(expr) != 4:
        raise BadSpecialForm("Unrecognized special form", expr)
    _, pred, conseq, alt = expr

    # Only #f is false; (), 0 and "" are all true
    if evaluate_fn(pred, env, loader) is False:
        return evaluate_fn(alt, env, loader)
    return evaluate_fn(conseq, env, loader)
