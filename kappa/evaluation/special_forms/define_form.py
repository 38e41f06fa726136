from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import BadSpecialForm
from kappa.evaluation.special_forms.lambda_form import make_closure
from kappa.modules.loader import Loader
from kappa.types.dotted_list import DottedList
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


def define_form(
    expr: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name expr)
    (define (name params...) body...)
    (define (name params... . rest) body...)

    Binds in the current environment and returns the bound value.
    """
    if len(expr) < 2:
        raise BadSpecialForm("Unrecognized special form", expr)
    target = expr[1]

    match target:
        case Symbol():
            if len(expr) != 3:
                raise BadSpecialForm("Unrecognized special form", expr)
            value = evaluate_fn(expr[2], env, loader)
            return env.define(target.name, value)

        case DottedList([Symbol() as name, *params], rest):
            spec = DottedList(params, rest) if params else rest
            fn = make_closure(spec, expr[2:], env, expr)
            return env.define(name.name, fn)

        case list([Symbol() as name, *params]):
            fn = make_closure(params, expr[2:], env, expr)
            return env.define(name.name, fn)

    raise BadSpecialForm("Unrecognized special form", expr)
