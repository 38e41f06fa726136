"""File loading for the `load` special form and the `read-all` primitive."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from kappa import SExpression
from kappa.config import get_load_path
from kappa.errors import DefaultError
from kappa.reader.parser import read_all

logger = logging.getLogger(__name__)

Loader = Callable[[str], list[SExpression]]


def resolve_path(filename: str) -> Path:
    """Resolve `filename` against the cwd, then each KAPPA_LOAD_PATH root.

    Falls back to the name as given so the open error names the file.
    """
    p = Path(filename)
    if p.is_absolute() or p.is_file():
        return p
    for root in get_load_path():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return p


def read_file(filename: str) -> str:
    path = resolve_path(filename)
    try:
        return path.read_text(encoding='utf-8')
    except OSError as exc:
        raise DefaultError(f"Cannot read file {filename}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise DefaultError(f"Cannot read file {filename}: not valid UTF-8 ({exc.reason})") from exc


def load(filename: str) -> list[SExpression]:
    """Read every expression from the named file."""
    logger.debug("loading %s", filename)
    forms = read_all(read_file(filename))
    logger.debug("read %d forms from %s", len(forms), filename)
    return forms
