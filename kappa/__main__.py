from __future__ import annotations

import argparse
import logging
import sys

from kappa.config import get_recursion_limit
from kappa.errors import SchemeError
from kappa.interpreter import Interpreter
from kappa.repl import run_repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kappa", description="A small Scheme interpreter")
    parser.add_argument("file", nargs="?", help="program to run; starts the REPL if omitted")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="bound to `args` as strings")
    parser.add_argument("--no-prelude", action="store_true", help="skip the standard library")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    opts = parser.parse_args(argv)

    if opts.verbose:
        logging.basicConfig(level=logging.DEBUG)
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    prelude = None if opts.no_prelude else "auto"
    with Interpreter(prelude=prelude) as interp:
        if opts.file is None:
            run_repl(interp)
            return 0
        try:
            interp.run_file(opts.file, opts.args)
        except SchemeError as err:
            print(err, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
