"""Application engine for kappa.

Centralizes function application for the evaluator and for primitives that
call back into the interpreter (`apply`):
- Primitive / IOPrimitive values are invoked directly with the argument list;
  they check their own arity and types.
- Closures check arity, bind parameters in a frame extended from the captured
  environment, then evaluate the body forms in order.
"""

from __future__ import annotations

from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import NotFunction, NumArgs, UnspecifiedReturn
from kappa.modules.loader import Loader, load
from kappa.printer import show
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Closure
from kappa.types.primitive import Primitive


def evaluate_body(
    body: list[SExpression],
    env: Environment,
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate forms in order and return the last value."""
    result: LispValue = None
    for form in body:
        result = evaluate_fn(form, env, loader)
    return result


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    loader: Loader,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises NumArgs(len(params), args) when the count does not fit: exact for
    fixed parameter lists, at least len(params) with a vararg.
    """
    arity = len(fn.params)
    if fn.vararg is None:
        if len(args) != arity:
            raise NumArgs(arity, args)
    elif len(args) < arity:
        raise NumArgs(arity, args)
    if not fn.body:
        raise UnspecifiedReturn(f"Procedure has no body: {fn}")

    frame = fn.bind(list(args))
    return evaluate_body(fn.body, frame, loader, evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    loader: Loader | None = None,
    evaluate_fn: EvaluatorFn | None = None,
) -> LispValue:
    """Apply a primitive or closure; anything else raises NotFunction."""
    if isinstance(head, Primitive):
        return head(list(args))
    if isinstance(head, Closure):
        if loader is None:
            loader = load
        if evaluate_fn is None:
            from kappa.evaluation.evaluator import evaluate0  # circular at import time
            evaluate_fn = evaluate0
        return apply_closure(head, args, loader, evaluate_fn)
    raise NotFunction("Not a function", show(head))
