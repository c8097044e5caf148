"""Layout dataclasses — geometric elements, cells, and the document."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from layoutkit.config import LIMITS
from layoutkit.errors import LayoutkitError
from layoutkit.properties.models import NamedProperty, FlatProperty


class LayoutError(LayoutkitError, ValueError):
    """Raised when an element is constructed in an illegal state."""

    def __init__(self, element: str, field_name: str, reason: str) -> None:
        self.element = element
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"{element}.{field_name}: {reason}")


class ExtensionScheme(Enum):
    """How a path's endpoints are capped relative to its centerline."""

    FLUSH = "flush"                 # ends stop at the first/last point
    HALF_WIDTH = "half_width"       # ends extend by half_width
    EXPLICIT = "explicit"           # ends extend by start/end_extension


# Opaque array-instancing descriptor owned by the serialization engine.
Repetition = Any

Offset = tuple[int, int]


def _non_negative(element: str, field_name: str, value: int) -> None:
    if value < 0:
        raise LayoutError(element, field_name, f"must be >= 0, got {value}")


# ── Elements ───────────────────────────────────────────────────────


@dataclass
class Rectangle:
    layer: int
    datatype: int
    x: int
    y: int
    width: int
    height: int
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)

    def __post_init__(self) -> None:
        _non_negative("Rectangle", "width", self.width)
        _non_negative("Rectangle", "height", self.height)


@dataclass
class Polygon:
    """Vertices are offsets from (x, y).  A repeated first point is kept as-is."""

    layer: int
    datatype: int
    x: int
    y: int
    points: list[Offset]
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [tuple(p) for p in self.points]

    @property
    def is_closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]


@dataclass
class Path:
    """A centerline with a half width.  Rendered width is ``2 * half_width``."""

    layer: int
    datatype: int
    x: int
    y: int
    half_width: int
    extension_scheme: ExtensionScheme
    points: list[Offset]
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)
    start_extension: int = 0        # EXPLICIT only
    end_extension: int = 0          # EXPLICIT only

    def __post_init__(self) -> None:
        _non_negative("Path", "half_width", self.half_width)
        self.points = [tuple(p) for p in self.points]
        if not isinstance(self.extension_scheme, ExtensionScheme):
            raise LayoutError("Path", "extension_scheme",
                              f"expected ExtensionScheme, got {self.extension_scheme!r}")

    @property
    def total_width(self) -> int:
        return 2 * self.half_width

    @property
    def extensions(self) -> tuple[int, int]:
        """Effective (start, end) extension implied by the scheme."""
        if self.extension_scheme is ExtensionScheme.HALF_WIDTH:
            return self.half_width, self.half_width
        if self.extension_scheme is ExtensionScheme.EXPLICIT:
            return self.start_extension, self.end_extension
        return 0, 0


@dataclass
class Placement:
    """An instance of another cell, referenced by name."""

    cell_name: str
    x: int
    y: int
    mirror: bool = False
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)


@dataclass
class Text:
    string: str
    layer: int
    texttype: int
    x: int
    y: int
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)


@dataclass
class Circle:
    layer: int
    datatype: int
    x: int
    y: int
    radius: int
    repetition: Repetition | None = None
    properties: list[NamedProperty] = field(default_factory=list)

    def __post_init__(self) -> None:
        _non_negative("Circle", "radius", self.radius)


Element = Union[Rectangle, Polygon, Path, Placement, Text, Circle]

ELEMENT_TYPES = (Rectangle, Polygon, Path, Placement, Text, Circle)


# ── Containers ─────────────────────────────────────────────────────


@dataclass
class Cell:
    """A named, ordered list of elements.  Order is drawing order."""

    name: str
    elements: list[Element] = field(default_factory=list)

    def add(self, element: Element) -> Cell:
        if not isinstance(element, ELEMENT_TYPES):
            raise TypeError(f"Not a layout element: {type(element).__name__}")
        self.elements.append(element)
        return self

    def placements(self) -> list[Placement]:
        return [e for e in self.elements if isinstance(e, Placement)]


@dataclass
class NameTable:
    """Index -> cell name registry used to resolve cross-references.

    Kept separately from ``LayoutDocument.cells``; nothing syncs the two.
    """

    cell_names: dict[int, str] = field(default_factory=dict)

    def register(self, name: str) -> int:
        """Return the index of ``name``, assigning the next free one if new."""
        for idx, existing in self.cell_names.items():
            if existing == name:
                return idx
        idx = max(self.cell_names, default=-1) + 1
        self.cell_names[idx] = name
        return idx

    def lookup(self, index: int) -> str | None:
        return self.cell_names.get(index)

    def __contains__(self, name: object) -> bool:
        return name in self.cell_names.values()


@dataclass
class LayoutDocument:
    """Top-level container.

    ``property_table`` holds document-level flat properties; query it with
    ``PropertyManager.from_properties(doc.property_table)``.
    """

    version: str = LIMITS.default_version
    unit: float = LIMITS.default_unit
    names: NameTable = field(default_factory=NameTable)
    cells: list[Cell] = field(default_factory=list)
    property_table: list[FlatProperty] = field(default_factory=list)

    def cell(self, name: str) -> Cell | None:
        """First cell called ``name``, or None."""
        return next((c for c in self.cells if c.name == name), None)

    def cell_names(self) -> list[str]:
        return [c.name for c in self.cells]
