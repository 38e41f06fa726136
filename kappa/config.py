from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (kappa package directory)
_KAPPA_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _KAPPA_DIR / 'prelude' / 'stdlib.scm'
DEFAULT_PROMPT = 'Lisp>>> '
# The evaluator recurses on the host stack; the CLI raises Python's limit to this
DEFAULT_RECURSION_LIMIT = 5_000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched for relative `load` file names, after the cwd."""
    return paths_from_env('KAPPA_LOAD_PATH', [])


def get_prelude_path() -> Path:
    return paths_from_env('KAPPA_PRELUDE', [_DEFAULT_PRELUDE])[0]


def get_prompt() -> str:
    return os.environ.get('KAPPA_PROMPT', DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    raw = os.environ.get('KAPPA_RECURSION_LIMIT', '').strip()
    return int(raw) if raw.isdigit() else DEFAULT_RECURSION_LIMIT
