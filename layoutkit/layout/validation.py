"""Document validation — report structural problems as readable messages."""

from __future__ import annotations

from layoutkit.config import LIMITS
from .models import (
    LayoutDocument, Rectangle, Polygon, Path, Placement, Text, Circle,
)


def validate_document(doc: LayoutDocument) -> list[str]:
    """Check a LayoutDocument's cross-references and codes. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Cell names unique and non-empty ──
    seen: set[str] = set()
    for i, cell in enumerate(doc.cells):
        if not cell.name:
            errors.append(f"Cell {i}: empty name")
        elif cell.name in seen:
            errors.append(f"Duplicate cell name '{cell.name}'")
        seen.add(cell.name)

    # ── Every cell registered in the name table ──
    for cell in doc.cells:
        if cell.name and cell.name not in doc.names:
            errors.append(f"Cell '{cell.name}': name not registered in name table")

    for cell in doc.cells:
        for idx, el in enumerate(cell.elements):
            where = f"Cell '{cell.name}' element {idx} ({type(el).__name__})"

            # ── Placement references ──
            if isinstance(el, Placement):
                if el.cell_name not in seen:
                    errors.append(f"{where}: references unknown cell '{el.cell_name}'")
                continue

            # ── Layer / datatype codes ──
            if isinstance(el, Text):
                codes = {"layer": el.layer, "texttype": el.texttype}
            elif isinstance(el, (Rectangle, Polygon, Path, Circle)):
                codes = {"layer": el.layer, "datatype": el.datatype}
            else:
                raise TypeError(f"Unknown layout element: {type(el).__name__}")
            for name, code in codes.items():
                if not LIMITS.layer_in_range(code):
                    errors.append(f"{where}: {name} {code} out of range (0–{LIMITS.layer_max})")

            # ── Point counts ──
            if isinstance(el, Polygon) and len(set(el.points)) < 3:
                errors.append(f"{where}: polygon needs at least 3 distinct points")
            elif isinstance(el, Path) and len(el.points) < 2:
                errors.append(f"{where}: path needs at least 2 points")

    return errors
