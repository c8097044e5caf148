"""PropertyManager — attribute-code index over a flat property list.

The round trip through the manager is canonicalizing, not identity:
duplicate codes collapse (last write wins) and ``to_properties`` returns
entries sorted by ascending attribute code, whatever the input order.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import FlatProperty


log = logging.getLogger(__name__)


class PropertyManager:
    """Read-only lookup over flat properties, keyed by attribute code."""

    def __init__(self) -> None:
        self._values: dict[int, str] = {}

    @classmethod
    def from_properties(cls, props: Iterable[FlatProperty]) -> PropertyManager:
        """Index ``props`` by attribute code.  Later duplicates overwrite earlier ones."""
        mgr = cls()
        for prop in props:
            if prop.attribute in mgr._values:
                log.debug(
                    "Attribute %d: %r overwritten by %r",
                    prop.attribute, mgr._values[prop.attribute], prop.value,
                )
            mgr._values[prop.attribute] = prop.value
        return mgr

    from_sequence = from_properties

    def get(self, attribute: int) -> str | None:
        return self._values.get(attribute)

    def has(self, attribute: int) -> bool:
        return attribute in self._values

    def attributes(self) -> list[int]:
        """All present attribute codes, ascending."""
        return sorted(self._values)

    def to_properties(self) -> list[FlatProperty]:
        """Rebuild a flat property list sorted by attribute code."""
        return [
            FlatProperty(attribute=a, value=self._values[a])
            for a in self.attributes()
        ]

    to_sequence = to_properties

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._values

    def __repr__(self) -> str:
        return f"PropertyManager({self.to_properties()!r})"
