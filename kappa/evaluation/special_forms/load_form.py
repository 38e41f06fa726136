from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.modules.loader import Loader
from kappa.types.environment import Environment


def load_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (load "file")
    A special form rather than a primitive: the loaded definitions must land
    in the caller's environment. Returns the value of the last expression, or
    the empty list for an empty file.
    """
    if len(expr) != 2 or not isinstance(expr[1], str):
        raise BadSpecialForm("Unrecognized special form", expr)
    result: LispValue = []
    for form in loader(expr[1]):
        result = evaluate_fn(form, env, loader)
    return result
