"""
rawini - a small parser for INI-style configuration text.

    from rawini import parse

    config, err = parse(open("app.ini", "rb"))
    if err is None:
        print(config.get_section("server").get_property_values("host"))
"""
from __future__ import annotations

from loguru import logger

from rawini.core.decode import DecodeOption, DecodeOptionSet, OptionKind
from rawini.core.models import PropertyNumber, RawConfig, RawSection
from rawini.parsers import (
    ConversionFailure,
    DanglingContinuation,
    DecodeError,
    DuplicateSection,
    EmptyOrMissingKey,
    IniError,
    MalformedSectionHeader,
    ParseError,
    ParseResult,
    RawConfigParser,
    RepeatedUniqueProperty,
    UnexpectedProperty,
    parse,
    parse_file,
)

__version__ = "0.1.0"

# Library stays quiet unless the application opts in with logger.enable("rawini").
logger.disable("rawini")

__all__ = [
    "ConversionFailure",
    "DanglingContinuation",
    "DecodeError",
    "DecodeOption",
    "DecodeOptionSet",
    "DuplicateSection",
    "EmptyOrMissingKey",
    "IniError",
    "MalformedSectionHeader",
    "OptionKind",
    "ParseError",
    "ParseResult",
    "PropertyNumber",
    "RawConfig",
    "RawConfigParser",
    "RawSection",
    "RepeatedUniqueProperty",
    "UnexpectedProperty",
    "__version__",
    "parse",
    "parse_file",
]
