"""I/O primitives: ports, file reading, `read`/`write` and `apply`.

These are installed as IOPrimitive values and follow the same calling
contract as the pure primitives. Ports opened from Lisp code are tracked in a
PortRegistry so the owning interpreter can close whatever is still open when
it shuts down.
"""
from __future__ import annotations

import sys
from typing import Callable

from kappa import EvaluatorFn, LispValue
from kappa.errors import DefaultError, NumArgs, TypeMismatch
from kappa.evaluation.apply import apply as apply_engine
from kappa.evaluation.evaluator import evaluate0
from kappa.modules.loader import Loader, load, read_file
from kappa.printer import show
from kappa.reader.parser import read
from kappa.types.environment import Environment
from kappa.types.port import Port
from kappa.types.primitive import IOPrimitive


class PortRegistry:
    """The set of ports opened through `open-*-file` and not yet closed."""

    def __init__(self):
        self._ports: list[Port] = []

    def open(self, filename: str, mode: str) -> Port:
        try:
            stream = open(filename, mode, encoding="utf-8")
        except OSError as exc:
            raise DefaultError(f"Cannot open file {filename}: {exc.strerror or exc}") from exc
        port = Port(stream, mode)
        self._ports.append(port)
        return port

    def close(self, port: Port) -> None:
        port.close()
        if port in self._ports:
            self._ports.remove(port)

    def close_all(self) -> None:
        while self._ports:
            self._ports.pop().close()

    @property
    def open_count(self) -> int:
        return len(self._ports)


def _filename(args: list[LispValue]) -> str:
    if len(args) != 1:
        raise NumArgs(1, args)
    if not isinstance(args[0], str):
        raise TypeMismatch("string", args[0])
    return args[0]


def _port_io(action: Callable[[], LispValue]) -> LispValue:
    try:
        return action()
    except (OSError, ValueError) as exc:
        # ValueError: I/O on a closed stream
        raise DefaultError(f"I/O error: {exc}") from exc


def make_io_primitives(
    ports: PortRegistry,
    loader: Loader = load,
    evaluate_fn: EvaluatorFn = evaluate0,
) -> dict[str, Callable[[list[LispValue]], LispValue]]:
    """Build the I/O primitives bound to one interpreter's ports and loader."""

    def apply_proc(args: list[LispValue]) -> LispValue:
        # (apply f '(a b)) or (apply f a b)
        match args:
            case [fn, list() as fn_args]:
                return apply_engine(fn, fn_args, loader, evaluate_fn)
            case [fn, *fn_args]:
                return apply_engine(fn, fn_args, loader, evaluate_fn)
        raise NumArgs(1, args)

    def make_port(mode: str):
        def open_file(args: list[LispValue]) -> Port:
            return ports.open(_filename(args), mode)
        return open_file

    def close_port(args: list[LispValue]) -> bool:
        match args:
            case [Port() as port]:
                ports.close(port)
                return True
            case [_]:
                return False
        raise NumArgs(1, args)

    def read_proc(args: list[LispValue]) -> LispValue:
        match args:
            case []:
                stream = sys.stdin
            case [Port() as port]:
                stream = port.stream
            case [bad]:
                raise TypeMismatch("port", bad)
            case _:
                raise NumArgs(1, args)
        return read(_port_io(stream.readline))

    def write_proc(args: list[LispValue]) -> bool:
        match args:
            case [obj]:
                stream = sys.stdout
            case [obj, Port() as port]:
                stream = port.stream
            case [_, bad]:
                raise TypeMismatch("port", bad)
            case _:
                raise NumArgs(1, args)
        _port_io(lambda: stream.write(show(obj) + "\n"))
        return True

    def read_contents(args: list[LispValue]) -> str:
        return read_file(_filename(args))

    def read_all(args: list[LispValue]) -> list[LispValue]:
        return loader(_filename(args))

    return {
        "apply": apply_proc,
        "open-input-file": make_port("r"),
        "open-output-file": make_port("w"),
        "close-input-port": close_port,
        "close-output-port": close_port,
        "read": read_proc,
        "write": write_proc,
        "read-contents": read_contents,
        "read-all": read_all,
    }


def register(
    env: Environment,
    ports: PortRegistry,
    loader: Loader = load,
) -> None:
    """Install the I/O primitives into `env` as IOPrimitive values."""
    primitives = make_io_primitives(ports, loader)
    env.update({name: IOPrimitive(name, fn) for name, fn in primitives.items()})
