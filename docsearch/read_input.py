"""Reading lines and numbers from a text stream."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_line(stream: TextIO | None = None) -> str:
    """Read one line without its line ending; ``""`` at end of input."""
    source = stream if stream is not None else sys.stdin
    return source.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO | None = None) -> int:
    """Read an integer, skipping blank lines, and discard the rest of its line."""
    source = stream if stream is not None else sys.stdin
    for line in source:
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        if match is None:
            raise ValueError(f"expected an integer, got {line.rstrip()!r}")
        return int(match.group(1))
    raise EOFError("no integer in input")