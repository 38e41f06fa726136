"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from kappa.config import get_prompt
from kappa.interpreter import Interpreter

logger = logging.getLogger(__name__)

QUIT = "quit"


def run_repl(
    interp: Interpreter,
    input_fn: Callable[[str], str] | None = None,
    output: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Prompt, evaluate and print until `quit` or end of input.

    Errors are printed and the loop continues.
    """
    read_line = input_fn if input_fn is not None else input
    out = output if output is not None else sys.stdout
    prompt = prompt if prompt is not None else get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            break
        if line.strip() == QUIT:
            break
        if not line.strip():
            continue
        print(interp.eval_to_string(line), file=out)
    logger.debug("repl finished")
