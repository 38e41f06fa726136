"""Improper list representation."""

from __future__ import annotations

from typing import NamedTuple

from kappa import LispValue


class DottedList(NamedTuple):
    """An improper list ``(h1 h2 ... . tail)``.

    ``heads`` always holds at least one value; ``tail`` is any value that is
    not itself a proper list (the reader and ``cons`` normalise that case).
    """

    heads: list[LispValue]
    tail: LispValue
