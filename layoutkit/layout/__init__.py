"""Layout — geometric elements, cells, and the top-level document.

Submodules:
  models        Element variants, Cell, NameTable, LayoutDocument, LayoutError.
  geometry      Absolute coordinates, Shapely shapes, bounding boxes.
  validation    Cross-reference and code-range checks (validate_document).
  serialization JSON conversion (document_to_dict, parse_document).
"""

from .models import (
    ExtensionScheme, Repetition,
    Rectangle, Polygon, Path, Placement, Text, Circle, Element,
    Cell, NameTable, LayoutDocument, LayoutError,
)
from .geometry import absolute_points, element_shape, element_bounds, cell_bounds
from .validation import validate_document
from .serialization import (
    element_to_dict, parse_element, document_to_dict, parse_document,
)

__all__ = [
    # Models
    "ExtensionScheme", "Repetition",
    "Rectangle", "Polygon", "Path", "Placement", "Text", "Circle", "Element",
    "Cell", "NameTable", "LayoutDocument", "LayoutError",
    # Geometry
    "absolute_points", "element_shape", "element_bounds", "cell_bounds",
    # Validation / Serialization
    "validate_document",
    "element_to_dict", "parse_element", "document_to_dict", "parse_document",
]
