from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Optional

from rawini.parsers.errors import ParseError

if TYPE_CHECKING:  # pragma: no cover
    from rawini.core.models import RawConfig


@dataclass(frozen=True)
class LogicalLine:
    """ One record handed to the record parser, already trimmed."""
    text: str
    line: int


class ParseResult(NamedTuple):
    """
    Outcome of a finished parse pass: exactly one of `config` / `error` is set.

    Unpacks like a pair:
      config, err = parse(text)
    """
    config: Optional["RawConfig"]
    error: Optional[ParseError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "RawConfig":
        if self.error is not None:
            raise self.error
        assert self.config is not None
        return self.config
