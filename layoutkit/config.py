"""Shared format limits for properties and geometry.

These values describe the integer widths and defaults an encoder is
entitled to assume.  Property construction, document validation, and the
serialization engine all read them from this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatLimits:
    """Integer ranges and defaults for layout interchange data."""

    attribute_min: int = -(2 ** 15)
    """Smallest attribute code a flat property can carry (signed 16-bit)."""

    attribute_max: int = 2 ** 15 - 1
    """Largest attribute code a flat property can carry."""

    integer_min: int = -(2 ** 63)
    """Smallest integer property value (signed 64-bit)."""

    integer_max: int = 2 ** 63 - 1
    """Largest integer property value."""

    layer_max: int = 2 ** 32 - 1
    """Largest layer / datatype / texttype code.  Codes are non-negative."""

    default_version: str = "1.0"
    """Version string stamped on new documents."""

    default_unit: float = 1.0
    """Database units per micron for new documents."""

    # ── Derived helpers ────────────────────────────────────────────

    def attribute_in_range(self, attribute: int) -> bool:
        return self.attribute_min <= attribute <= self.attribute_max

    def integer_in_range(self, value: int) -> bool:
        return self.integer_min <= value <= self.integer_max

    def layer_in_range(self, code: int) -> bool:
        return 0 <= code <= self.layer_max


# Shared default limits.
LIMITS = FormatLimits()
