"""Runtime environment for kappa.

An Environment maps names to shared, mutable Cells. There is no parent link:
extending an environment copies the parent's name -> cell associations (the
cells themselves are shared, not duplicated) and then adds the new bindings.
Each environment also records which names it owns, i.e. which cells it
created itself rather than inherited.

Consequences, relied upon by closures:

- ``set`` mutates a cell in place, so the change is seen through every
  environment that shares that cell (the defining scope, every closure that
  captured it, every call frame extended from it).
- ``define`` and parameter binding create cells in one environment only; the
  parent never sees them. Redefining an owned name reuses its cell, while
  defining an inherited name shadows it with a fresh cell.
- An environment extended from a parent does not see names the parent
  defines afterwards. Closures capture the environment object itself, so a
  function defined at top level still sees later top-level definitions
  (including itself, for recursion); the copy happens when a call frame is
  built.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from kappa import LispValue
from kappa.errors import UnboundVar


class Cell:
    """A mutable box holding the value of one binding."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class Environment:
    """Mapping from names to shared Cells with copy-on-extend semantics."""

    __slots__ = ("bindings", "owned")

    def __init__(self, bindings: dict[str, Cell] | None = None):
        self.bindings: dict[str, Cell] = bindings if bindings is not None else {}
        # Names whose cells were created here (not copied from a parent)
        self.owned: set[str] = set(self.bindings)

    def is_bound(self, name: str) -> bool:
        return name in self.bindings

    __contains__ = is_bound

    def lookup(self, name: str) -> LispValue:
        """Return the value bound to `name`.

        Raises UnboundVar if the name is absent from this environment.
        """
        cell = self.bindings.get(name)
        if cell is None:
            raise UnboundVar("Getting an unbound variable", name)
        return cell.value

    def set(self, name: str, value: LispValue) -> LispValue:
        """Overwrite an existing binding in place and return `value`.

        Raises UnboundVar if the name is not bound.
        """
        cell = self.bindings.get(name)
        if cell is None:
            raise UnboundVar("Setting an unbound variable", name)
        cell.value = value
        return value

    def define(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` in this environment only and return `value`. Never fails."""
        if name in self.owned:
            self.bindings[name].value = value
        else:
            self.bindings[name] = Cell(value)
            self.owned.add(name)
        return value

    def extend(self, bindings: Iterable[tuple[str, LispValue]] = ()) -> Environment:
        """Return a child whose associations start as a copy of ours.

        The bindings are then defined in order, so later bindings override
        earlier ones and all of them override the inherited associations.
        """
        child = Environment.__new__(Environment)
        child.bindings = dict(self.bindings)
        child.owned = set()
        for name, value in bindings:
            child.define(name, value)
        return child

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def names(self) -> list[str]:
        return list(self.bindings)

    def __eq__(self, other: object) -> bool:
        # Same names bound to the very same cells.
        if not isinstance(other, Environment):
            return NotImplemented
        if self is other:
            return True
        if self.bindings.keys() != other.bindings.keys():
            return False
        return all(cell is other.bindings[k] for k, cell in self.bindings.items())

    __hash__ = None  # mutable

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(self.bindings))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.bindings)} bindings>"
