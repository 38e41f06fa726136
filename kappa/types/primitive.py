"""Native callables installed into the root environment."""

from __future__ import annotations

from typing import Callable

from kappa import LispValue

PrimitiveFn = Callable[[list[LispValue]], LispValue]


class Primitive:
    """A host function taking the evaluated argument list.

    Equality is identity: two primitives are the same only if they are the
    same object, regardless of the function they wrap.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class IOPrimitive(Primitive):
    """A primitive that performs I/O. Invoked exactly like a Primitive."""

    __slots__ = ()
