from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar

from loguru import logger

from rawini.parsers.errors import (
    ConversionFailure,
    DecodeError,
    RepeatedUniqueProperty,
    UnexpectedProperty,
)

D = TypeVar("D")

# Converts one raw value and stores it on the destination. Raise to reject it.
Converter = Callable[[str, D], None]


class OptionKind(str, Enum):
    UNIQUE = "unique"
    MULTI = "multi"


@dataclass(frozen=True)
class DecodeOption(Generic[D]):
    kind: OptionKind
    parse: Converter[D]
    usage: str = ""

    def __post_init__(self) -> None:
        # accept "unique" / "multi"; anything else raises ValueError
        object.__setattr__(self, "kind", OptionKind(self.kind))


class DecodeOptionSet(Generic[D]):
    """
    Declarative mapping of property name -> DecodeOption.

    Example:

        def set_port(v: str, d: Settings) -> None:
            d.port = int(v)

        table = DecodeOptionSet({"port": DecodeOption(OptionKind.UNIQUE, set_port)})
        err = table.decode(config.get_section("server"), settings)
    """

    def __init__(self, options: Optional[Mapping[str, DecodeOption[D]]] = None) -> None:
        self._options: Dict[str, DecodeOption[D]] = dict(options or {})

    def __getitem__(self, name: str) -> DecodeOption[D]:
        return self._options[name]

    def __setitem__(self, name: str, option: DecodeOption[D]) -> None:
        self._options[name] = option

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def usage_lines(self) -> List[str]:
        out: List[str] = []
        for name, opt in sorted(self._options.items()):
            line = f"{name} ({opt.kind.value})"
            out.append(f"{line}: {opt.usage}" if opt.usage else line)
        return out

    def decode(self, section: Mapping[str, Sequence[str]], destination: D) -> Optional[DecodeError]:
        """
        Feed every value in `section` to its option's converter.

        Returns the first problem found, or None. On failure the destination
        may already hold some converted values and should be discarded.
        """
        for name, values in section.items():
            opt = self._options.get(name)
            if opt is None:
                return UnexpectedProperty(name)
            if opt.kind is OptionKind.UNIQUE and len(values) > 1:
                return RepeatedUniqueProperty(name, len(values))

            for v in values:
                try:
                    opt.parse(v, destination)
                except Exception as e:
                    logger.debug("converter for {!r} rejected {!r}: {}", name, v, e)
                    return ConversionFailure(name, e)
        return None
