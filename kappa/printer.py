"""Printer: render kappa values as text.

The output of ``show`` is what the REPL prints and what tests compare against,
and the reader reads it back for every data value.
"""

from __future__ import annotations

from io import StringIO

from kappa import LispValue
from kappa.types.dotted_list import DottedList
from kappa.types.lambda_fn import Closure
from kappa.types.port import Port
from kappa.types.primitive import IOPrimitive, Primitive
from kappa.types.symbol import Symbol

_STRING_ESCAPES = str.maketrans({'"': '\\"', "\\": "\\\\"})


def show(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write(value: LispValue, out: StringIO) -> None:
    match value:
        case bool():
            out.write("#t" if value else "#f")
        case int():
            out.write(str(value))
        case str():
            out.write('"')
            out.write(value.translate(_STRING_ESCAPES))
            out.write('"')
        case Symbol():
            out.write(value.name)
        case DottedList(heads, tail):
            out.write("(")
            _write_items(heads, out)
            out.write(" . ")
            _write(tail, out)
            out.write(")")
        case list():
            out.write("(")
            _write_items(value, out)
            out.write(")")
        case Closure():
            out.write(str(value))
        case IOPrimitive():
            out.write("<IO primitive>")
        case Primitive():
            out.write("<primitive>")
        case Port():
            out.write("<IO port>")
        case _:
            out.write(f"<{type(value).__name__}>")


def _write_items(items: list[LispValue], out: StringIO) -> None:
    first = True
    for item in items:
        if not first:
            out.write(" ")
        _write(item, out)
        first = False
