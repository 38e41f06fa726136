"""Error taxonomy for kappa.

Every failure in the reader, evaluator or primitive library is raised as one
of these exceptions and propagates unchanged to the driver. ``str(err)`` is the
text shown to the user: ``"<category message>: <detail>"``.
"""

from __future__ import annotations


def _show(value) -> str:
    # Deferred import: the printer depends on the value types, which import us.
    from kappa.printer import show
    return show(value)


class SchemeError(Exception):
    """Base class for all kappa errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NumArgs(SchemeError):
    """Raised when a function receives the wrong number of arguments."""

    def __init__(self, expected: int, found: list):
        self.expected = expected
        self.found = list(found)
        super().__init__(
            f"Expected {expected} args; found values "
            + " ".join(_show(v) for v in self.found)
        )


class TypeMismatch(SchemeError):
    """Raised when a value cannot be used (or coerced) as the expected kind."""

    def __init__(self, expected: str, found):
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid type: expected {expected}, found {_show(found)}")


class ParseError(SchemeError):
    """Raised by the reader; carries a 1-based line and column."""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        self.reason = message
        self.line = line
        self.column = column
        super().__init__(f"Parse error at line {line}, column {column}: {message}")


class BadSpecialForm(SchemeError):
    """Raised for expressions that match no evaluation rule."""

    def __init__(self, message: str, form):
        self.context = message
        self.form = form
        super().__init__(f"{message}: {_show(form)}")


class NotFunction(SchemeError):
    """Raised when applying something that is not callable."""

    def __init__(self, message: str, name: str):
        self.context = message
        self.name = name
        super().__init__(f"{message}: {name}")


class UnboundVar(SchemeError):
    """Raised when reading or setting a name with no binding."""

    def __init__(self, message: str, name: str):
        self.context = message
        self.name = name
        super().__init__(f"{message}: {name}")


class UnspecifiedReturn(SchemeError):
    """Raised when a closure has no body form to produce a value."""


class DefaultError(SchemeError):
    """Catch-all for host-level and I/O failures."""
