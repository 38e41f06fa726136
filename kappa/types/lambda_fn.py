"""Closure representation for kappa."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from kappa import LispValue, SExpression
from kappa.types.environment import Environment


class Closure:
    """A user-defined function: parameters, body forms and captured env."""

    __slots__ = ("params", "vararg", "body", "env")

    def __init__(
        self,
        params: list[str],
        vararg: Optional[str],
        body: list[SExpression],
        env: Environment,
    ):
        self.params: list[str] = params
        self.vararg: Optional[str] = vararg
        self.body: list[SExpression] = body
        self.env: Environment = env

    def bind(self, args: list[LispValue]) -> Environment:
        """Return the call frame binding `args` to the parameters.

        Arity has already been checked by the caller.
        """
        n = len(self.params)
        bindings = list(zip(self.params, args[:n]))
        if self.vararg is not None:
            bindings.append((self.vararg, list(args[n:])))
        return self.env.extend(bindings)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            if self.vararg is not None:
                if self.params:
                    buffer.write(" ")
                buffer.write(f". {self.vararg}")
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
