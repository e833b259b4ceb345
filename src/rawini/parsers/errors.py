from __future__ import annotations

from typing import Optional


class IniError(Exception):
    """Base class for every error rawini reports."""


# ----------------------------
# Parse errors
# ----------------------------

class ParseError(IniError):
    """
    A fault tied to one physical input line.

    `line` is 1-based and relative to the source being fed when the fault
    was detected; `source` is the label given to feed() (a path, usually).
    """

    reason: str = "invalid line"

    def __init__(
        self,
        line: int,
        reason: Optional[str] = None,
        *,
        source: Optional[str] = None,
    ) -> None:
        self.line = line
        self.reason = reason or self.reason
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        msg = f"error parsing line {self.line}: {self.reason}"
        return f"{self.source}: {msg}" if self.source else msg

    def __reduce__(self):
        return type(self), (self.line, self.reason), {"source": self.source}


class MalformedSectionHeader(ParseError):
    reason = "malformed section header"


class DuplicateSection(ParseError):
    def __init__(self, line: int, name: str, *, source: Optional[str] = None) -> None:
        self.name = name
        super().__init__(line, f"duplicate section name {name!r}", source=source)

    def __reduce__(self):
        return type(self), (self.line, self.name), {"source": self.source}


class EmptyOrMissingKey(ParseError):
    reason = "invalid property line"


class DanglingContinuation(ParseError):
    reason = "continuation at end of file"


# ----------------------------
# Decode errors
# ----------------------------

class DecodeError(IniError):
    """A section could not be projected onto a destination."""

    def __init__(self, property: str, message: str) -> None:
        self.property = property
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.property, str(self))


class UnexpectedProperty(DecodeError):
    def __init__(self, property: str) -> None:
        super().__init__(property, f"unexpected property {property!r}")

    def __reduce__(self):
        return type(self), (self.property,)


class RepeatedUniqueProperty(DecodeError):
    def __init__(self, property: str, count: int) -> None:
        self.count = count
        super().__init__(
            property, f"property {property!r} may be set once, got {count} values"
        )

    def __reduce__(self):
        return type(self), (self.property, self.count)


class ConversionFailure(DecodeError):
    def __init__(self, property: str, cause: BaseException) -> None:
        super().__init__(property, f"invalid value for property {property!r}: {cause}")
        self.__cause__ = cause

    def __reduce__(self):
        return type(self), (self.property, self.__cause__)
