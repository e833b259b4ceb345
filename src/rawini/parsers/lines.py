"""
Physical line handling: source normalization and continuation joining.

A physical line ending in a backslash continues onto the next one. The
backslash is dropped and the next line is appended with no separator:

    message=hello \\
    world

yields the single logical line "message=hello world".
"""
from __future__ import annotations

import io
from typing import Iterable, Iterator, List, Optional, Union

from rawini.parsers.types import LogicalLine

CONTINUATION = "\\"
BOM = "\ufeff"

LineSource = Union[str, bytes, Iterable[str], Iterable[bytes]]


def strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_physical_lines(source: LineSource, *, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield lines with their terminators removed.

    Whole text (str/bytes) is split on "\\n" only; any other iterable is
    taken to already yield one line per item (text or binary file objects,
    lists of lines). A byte order mark on the first line is dropped. Errors
    raised by the source propagate unchanged.
    """
    if isinstance(source, str):
        source = io.StringIO(source)
    elif isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    first = True
    for raw in source:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode(encoding)
        if first:
            raw = raw.lstrip(BOM)
            first = False
        yield strip_eol(raw)


class LineAssembler:
    """
    Joins continuation-marked physical lines into logical lines.

    Knows nothing about sections or properties; the caller decides what a
    logical line means.
    """

    def __init__(self) -> None:
        self._parts: Optional[List[str]] = None

    @property
    def accumulating(self) -> bool:
        return self._parts is not None

    @property
    def pending(self) -> str:
        return "".join(self._parts or ())

    def push(self, physical: str, line: int) -> Optional[LogicalLine]:
        """
        Feed one physical line.

        Returns None while a continuation is open or when the assembled line
        is blank, otherwise the trimmed logical line.
        """
        if physical.endswith(CONTINUATION):
            if self._parts is None:
                self._parts = []
            self._parts.append(physical[: -len(CONTINUATION)])
            return None

        text = (self.pending + physical).strip()
        self._parts = None
        if not text:
            return None
        return LogicalLine(text=text, line=line)

    def reset(self) -> None:
        self._parts = None
