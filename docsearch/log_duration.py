"""Context manager that reports how long a block took."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class LogDuration:
    """Writes ``"<id>: <milliseconds> ms"`` to ``out`` when the block ends."""

    def __init__(self, id: str, out: TextIO | None = None) -> None:
        self.id = id
        self._out = out
        self._start = 0.0

    def __enter__(self) -> "LogDuration":
        self._start = time.monotonic()
        return self

    def __exit__(self, *args) -> bool:
        elapsed = time.monotonic() - self._start
        out = self._out if self._out is not None else sys.stderr
        out.write(f"{self.id}: {int(elapsed * 1000)} ms\n")
        out.flush()
        return False