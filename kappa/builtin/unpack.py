"""Weak-typing coercions shared by the primitive library.

Each unpacker either returns a host value or raises TypeMismatch naming the
expected kind and the offending value.
"""

from __future__ import annotations

import re

from kappa import LispValue
from kappa.errors import TypeMismatch
from kappa.reader.parser import INT64_MAX, INT64_MIN

_INT_RE = re.compile(r"[+-]?[0-9]+")


def unpack_num(value: LispValue) -> int:
    """Numbers as-is, numeric strings parsed, one-element lists unwrapped.

    A parsed string must fit the signed 64-bit range like a literal does.
    """
    match value:
        case bool():
            pass
        case int():
            return value
        case str():
            text = value.strip()
            if _INT_RE.fullmatch(text):
                number = int(text)
                if INT64_MIN <= number <= INT64_MAX:
                    return number
        case list([single]):
            return unpack_num(single)
    raise TypeMismatch("number", value)


def unpack_str(value: LispValue) -> str:
    """Strings as-is; numbers and booleans rendered as text."""
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
    raise TypeMismatch("string", value)


def unpack_bool(value: LispValue) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeMismatch("boolean", value)


UNPACKERS = (unpack_num, unpack_str, unpack_bool)
