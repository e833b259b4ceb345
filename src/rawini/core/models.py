from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple


class PropertyNumber(str):
    """
    Raw number text of a property: all values joined by a single space.

    No parsing happens until the caller asks for one of the conversions.
    """

    def int(self) -> int:
        return int(self)

    def float(self) -> float:
        return float(self)

    def decimal(self) -> Decimal:
        return Decimal(self)


class RawSection(Mapping):
    """
    Property name -> values, in the order they were set.

    Read-only for callers; the parser fills it through _add_property().
    """

    def __init__(self) -> None:
        self._props: Dict[str, List[str]] = {}

    def _add_property(self, name: str, value: str) -> None:
        self._props.setdefault(name, []).append(value)

    def __getitem__(self, name: str) -> Tuple[str, ...]:
        return tuple(self._props[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __repr__(self) -> str:
        return f"RawSection({self._props!r})"

    def properties(self) -> List[str]:
        """Unique property names set at least once."""
        return list(self._props)

    def get_property_values(self, name: str) -> List[str]:
        """All values for `name`; an empty list if it was never set."""
        return list(self._props.get(name, ()))

    def get_property_number(self, name: str) -> Optional[PropertyNumber]:
        """
        Values of `name` joined for numeric interpretation, or None if the
        property was never set.
        """
        if name not in self._props:
            return None
        return PropertyNumber(" ".join(self._props[name]))


class RawConfig:
    """
    A parsed document: the global section plus named sections.

    Section names keep the order in which they were first declared.
    """

    def __init__(self) -> None:
        self._global = RawSection()
        self._sections: Dict[str, RawSection] = {}

    @property
    def global_section(self) -> RawSection:
        return self._global

    def _add_section(self, name: str) -> RawSection:
        section = RawSection()
        self._sections[name] = section
        return section

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def section_names(self) -> List[str]:
        return list(self._sections)

    def sections(self) -> Mapping[str, RawSection]:
        return MappingProxyType(self._sections)

    def get_section(self, name: str) -> Optional[RawSection]:
        return self._sections.get(name)

    def to_dict(self) -> Dict[str, Dict[str, List[str]]]:
        """Plain dict view, global section under the empty name."""
        out: Dict[str, Dict[str, List[str]]] = {}
        for name, section in [("", self._global), *self._sections.items()]:
            out[name] = {k: list(v) for k, v in section.items()}
        return out

    def __repr__(self) -> str:
        return f"RawConfig(sections={self.section_names()!r})"
