from __future__ import annotations

from rawini.parsers.errors import (
    ConversionFailure,
    DanglingContinuation,
    DecodeError,
    DuplicateSection,
    EmptyOrMissingKey,
    IniError,
    MalformedSectionHeader,
    ParseError,
    RepeatedUniqueProperty,
    UnexpectedProperty,
)
from rawini.parsers.ini_parser import RawConfigParser, parse, parse_file
from rawini.parsers.lines import LineAssembler
from rawini.parsers.types import LogicalLine, ParseResult

__all__ = [
    "ConversionFailure",
    "DanglingContinuation",
    "DecodeError",
    "DuplicateSection",
    "EmptyOrMissingKey",
    "IniError",
    "LineAssembler",
    "LogicalLine",
    "MalformedSectionHeader",
    "ParseError",
    "ParseResult",
    "RawConfigParser",
    "RepeatedUniqueProperty",
    "UnexpectedProperty",
    "parse",
    "parse_file",
]
