"""
Parser for a plain INI dialect.

  - Comments are lines whose first non-blank character is '#' or ';'.
  - A line ending with a '\\' continues onto the next line.
  - A continuation may not run into a comment line or the end of input.
  - [name] opens a section; key=value adds a value to the current section.
    Repeated keys accumulate values in order.

Errors are values: feed() and finish() hand back the first fault found and
the pass ignores the rest of its input once one is recorded.
"""
from __future__ import annotations

from os import PathLike
from typing import Optional, Tuple, Union

from loguru import logger

from rawini.core.models import RawConfig, RawSection
from rawini.parsers.errors import (
    DanglingContinuation,
    DuplicateSection,
    EmptyOrMissingKey,
    MalformedSectionHeader,
    ParseError,
)
from rawini.parsers.lines import LineAssembler, LineSource, iter_physical_lines
from rawini.parsers.types import LogicalLine, ParseResult

COMMENT_CHARS = ("#", ";")

StrPath = Union[str, "PathLike[str]"]


def is_comment(physical: str) -> bool:
    return physical.lstrip().startswith(COMMENT_CHARS)


class RawConfigParser:
    """
    Builds a RawConfig from one or more sources.

    Feed as many sources as needed (they merge into one document), then call
    finish() once. finish() resets the parser so it can start a new pass.
    Instances are not safe to share between threads.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._reset()

    def _reset(self) -> None:
        self._config = RawConfig()
        self._current: RawSection = self._config.global_section
        self._assembler = LineAssembler()
        self._lines = 0
        self._source_line = 0
        self._source: Optional[str] = None
        # line and source of the last physical line that opened or extended a continuation
        self._continued_at: Tuple[int, Optional[str]] = (0, None)
        self._err: Optional[ParseError] = None

    @property
    def lines_consumed(self) -> int:
        """Physical lines seen in this pass, across all sources."""
        return self._lines

    @property
    def error(self) -> Optional[ParseError]:
        return self._err

    def feed(self, source: LineSource, *, name: Optional[str] = None) -> Optional[ParseError]:
        """
        Consume every line of `source`.

        Returns the pass's first error, if any. Once an error is recorded the
        remaining lines are only counted.
        """
        self._source = name
        self._source_line = 0
        for physical in iter_physical_lines(source, encoding=self.encoding):
            self._lines += 1
            self._source_line += 1
            if self._err is None:
                self._parse_line(physical)
        return self._err

    def parse_file(self, path: StrPath) -> Optional[ParseError]:
        """
        Feed the contents of a file. A file is a complete stream, so an open
        continuation at its end is an error. OSError from opening/reading
        propagates.
        """
        with open(path, "rb") as fh:
            self.feed(fh, name=str(path))
        self._close_continuation()
        return self._err

    def finish(self) -> ParseResult:
        """
        Close the pass: returns the built document or the first error.

        Always resets the parser, even on error.
        """
        self._close_continuation()

        config, err = self._config, self._err
        logger.debug(
            "finished pass: {} lines, {} sections, error={}",
            self._lines,
            len(config.section_names()),
            err,
        )
        self._reset()
        if err is not None:
            return ParseResult(None, err)
        return ParseResult(config, None)

    # ----------------------------
    # Line handling
    # ----------------------------

    def _close_continuation(self) -> None:
        if self._err is None and self._assembler.accumulating:
            line, source = self._continued_at
            self._fail(DanglingContinuation(line, source=source))

    def _fail(self, err: ParseError) -> None:
        if self._err is None:
            logger.warning("{}", err)
            self._err = err

    def _parse_line(self, physical: str) -> None:
        if is_comment(physical):
            if self._assembler.accumulating:
                self._fail(
                    DanglingContinuation(
                        self._source_line,
                        "invalid continuation into comment line",
                        source=self._source,
                    )
                )
            return

        logical = self._assembler.push(physical, self._source_line)
        if logical is None:
            if self._assembler.accumulating:
                self._continued_at = (self._source_line, self._source)
            return

        if logical.text.startswith("["):
            self._parse_section_header(logical)
        else:
            self._parse_property(logical)

    def _parse_section_header(self, logical: LogicalLine) -> None:
        name, sep, trailing = logical.text[1:].partition("]")
        if not sep:
            self._fail(
                MalformedSectionHeader(
                    logical.line, "no section header end character found", source=self._source
                )
            )
            return
        if trailing:
            self._fail(
                MalformedSectionHeader(
                    logical.line, "trailing characters after section header", source=self._source
                )
            )
            return
        if not name:
            self._fail(
                MalformedSectionHeader(logical.line, "empty section name", source=self._source)
            )
            return
        if self._config.has_section(name):
            self._fail(DuplicateSection(logical.line, name, source=self._source))
            return

        logger.debug("section {!r} declared at line {}", name, logical.line)
        self._current = self._config._add_section(name)

    def _parse_property(self, logical: LogicalLine) -> None:
        key, sep, value = logical.text.partition("=")
        key = key.strip()
        if not sep or not key:
            self._fail(EmptyOrMissingKey(logical.line, source=self._source))
            return

        self._current._add_property(key, value.strip())


def parse(source: LineSource, *, encoding: str = "utf-8") -> ParseResult:
    """Parse a whole source in one go."""
    cp = RawConfigParser(encoding=encoding)
    cp.feed(source)
    return cp.finish()


def parse_file(path: StrPath, *, encoding: str = "utf-8") -> ParseResult:
    """Parse one file. OSError from opening/reading propagates."""
    cp = RawConfigParser(encoding=encoding)
    cp.parse_file(path)
    return cp.finish()
