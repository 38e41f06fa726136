from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Sequence

from kappa import LispValue
from kappa.builtin import env_builtin, io_builtin
from kappa.builtin.io_builtin import PortRegistry
from kappa.config import get_prelude_path
from kappa.errors import SchemeError
from kappa.evaluation.evaluator import evaluate
from kappa.modules.loader import Loader, load
from kappa.printer import show
from kappa.reader.parser import read_all
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def primitive_bindings(ports: PortRegistry, loader: Loader = load) -> Environment:
    """Return a root environment holding every primitive and I/O primitive."""
    env = Environment()
    env_builtin.register(env)
    io_builtin.register(env, ports, loader)
    return env


class Interpreter:
    """
    Orchestrates reading and evaluating kappa code.
    Keeps one root Environment (and the ports opened from it) across calls.
    Use as a context manager to close any ports left open.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        loader: Loader | None = None,
    ):
        self.loader: Loader = loader if loader is not None else load
        self.ports = PortRegistry()
        self.env: Environment = primitive_bindings(self.ports, self.loader)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                logger.debug("loading prelude from %s", path)
                self.eval(path.read_text(encoding='utf-8'))
        else:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value.

        An empty program evaluates to the empty list. Errors propagate.
        """
        result: LispValue = []
        for expr in read_all(code):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("eval %s", show(expr))
            result = evaluate(expr, self.env, self.loader)
        return result

    def eval_to_string(self, code: str) -> str:
        """Evaluate `code` and render the result or the error message."""
        try:
            return show(self.eval(code))
        except SchemeError as err:
            return str(err)

    def run_file(self, path: str | Path, args: Sequence[str] = ()) -> LispValue:
        """Bind `args` to a list of strings, then load the file."""
        self.env.define("args", [str(a) for a in args])
        return evaluate([Symbol("load"), str(path)], self.env, self.loader)

    def close(self) -> None:
        self.ports.close_all()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
