from __future__ import annotations

from typing import IO


class Port:
    """Opaque handle around an open host stream."""

    __slots__ = ("stream", "mode")

    def __init__(self, stream: IO[str], mode: str):
        self.stream = stream
        self.mode = mode

    @property
    def closed(self) -> bool:
        return self.stream.closed

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()

    def __repr__(self) -> str:
        return f"<Port {self.mode} {getattr(self.stream, 'name', '?')!s}>"
