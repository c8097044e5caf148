"""Property dataclasses — the two sibling property models.

Flat properties pair a 16-bit attribute code with one string.  Named
properties pair a name with an ordered list of typed values.  The two are
kept as distinct types; neither can stand in for the other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from layoutkit.config import LIMITS
from layoutkit.errors import LayoutkitError


class PropertyError(LayoutkitError, ValueError):
    """Raised when a property or property value is built from an illegal input."""

    def __init__(self, kind: str, value: object, reason: str) -> None:
        self.kind = kind
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {kind} {value!r}: {reason}")


# ── Property values (closed set) ───────────────────────────────────


@dataclass(frozen=True)
class StringValue:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise PropertyError("string value", self.value, "expected str")


@dataclass(frozen=True)
class IntegerValue:
    """Signed 64-bit integer.  ``bool`` is not accepted."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise PropertyError("integer value", self.value, "expected int")
        if not LIMITS.integer_in_range(self.value):
            raise PropertyError("integer value", self.value, "outside signed 64-bit range")


@dataclass(frozen=True)
class RealValue:
    """64-bit float.  An ``int`` argument is stored as the equal float."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise PropertyError("real value", self.value, "expected float")
        try:
            object.__setattr__(self, "value", float(self.value))
        except OverflowError:
            raise PropertyError("real value", self.value, "outside 64-bit float range") from None


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise PropertyError("boolean value", self.value, "expected bool")


PropertyValue = Union[StringValue, IntegerValue, RealValue, BooleanValue]

PROPERTY_VALUE_TYPES = (StringValue, IntegerValue, RealValue, BooleanValue)


def value_of(scalar: str | int | float | bool) -> PropertyValue:
    """Wrap a Python scalar in the matching PropertyValue variant.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    """
    if isinstance(scalar, bool):
        return BooleanValue(scalar)
    if isinstance(scalar, int):
        return IntegerValue(scalar)
    if isinstance(scalar, float):
        return RealValue(scalar)
    if isinstance(scalar, str):
        return StringValue(scalar)
    raise PropertyError("property scalar", scalar, "expected str, int, float or bool")


# ── Properties ─────────────────────────────────────────────────────


@dataclass
class NamedProperty:
    """A named property with zero or more typed values, order preserved."""

    name: str
    values: list[PropertyValue] = field(default_factory=list)

    def __post_init__(self) -> None:
        for v in self.values:
            if not isinstance(v, PROPERTY_VALUE_TYPES):
                raise PropertyError("property value", v, f"not a PropertyValue (property '{self.name}')")


@dataclass
class FlatProperty:
    """An attribute-coded property carrying a single string."""

    attribute: int
    value: str

    def __post_init__(self) -> None:
        if isinstance(self.attribute, bool) or not isinstance(self.attribute, int):
            raise PropertyError("attribute code", self.attribute, "expected int")
        if not LIMITS.attribute_in_range(self.attribute):
            raise PropertyError("attribute code", self.attribute, "outside signed 16-bit range")
        if not isinstance(self.value, str):
            raise PropertyError("attribute value", self.value, "expected str")
