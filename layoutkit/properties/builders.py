"""Chained builders for both property models."""

from __future__ import annotations

from .models import (
    FlatProperty, NamedProperty,
    StringValue, IntegerValue, RealValue, BooleanValue, PropertyValue,
)


class FlatPropertyBuilder:
    """Accumulates flat properties in insertion order.

    Duplicate attribute codes are kept as separate entries; collapsing
    them is the PropertyManager's job.
    """

    def __init__(self) -> None:
        self._properties: list[FlatProperty] = []

    def add(self, attribute: int, value: str) -> FlatPropertyBuilder:
        self._properties.append(FlatProperty(attribute=attribute, value=value))
        return self

    def build(self) -> list[FlatProperty]:
        return list(self._properties)

    def __len__(self) -> int:
        return len(self._properties)


class NamedPropertyBuilder:
    """Accumulates single-valued named properties, one method per value kind.

    Multi-valued properties are built directly with
    ``NamedProperty(name, [v1, v2, ...])``.
    """

    def __init__(self) -> None:
        self._properties: list[NamedProperty] = []

    def _push(self, name: str, value: PropertyValue) -> NamedPropertyBuilder:
        self._properties.append(NamedProperty(name=name, values=[value]))
        return self

    def add_string(self, name: str, value: str) -> NamedPropertyBuilder:
        return self._push(name, StringValue(value))

    def add_integer(self, name: str, value: int) -> NamedPropertyBuilder:
        return self._push(name, IntegerValue(value))

    def add_real(self, name: str, value: float) -> NamedPropertyBuilder:
        return self._push(name, RealValue(value))

    def add_boolean(self, name: str, value: bool) -> NamedPropertyBuilder:
        return self._push(name, BooleanValue(value))

    def build(self) -> list[NamedProperty]:
        return list(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
