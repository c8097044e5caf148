"""Layout serialization — convert a LayoutDocument to and from JSON-safe dicts."""

from __future__ import annotations

import json

from layoutkit.properties.serialization import (
    named_properties_to_list, parse_named_properties,
    flat_properties_to_list, parse_flat_properties,
)

from .models import (
    Element, Cell, NameTable, LayoutDocument, ExtensionScheme,
    Rectangle, Polygon, Path, Placement, Text, Circle,
)


def _check_repetition(rep: object) -> None:
    """Repetition payloads must come back from JSON unchanged."""
    if json.loads(json.dumps(rep)) != rep:
        raise ValueError(f"Repetition payload does not survive JSON unchanged: {rep!r}")


def _common(el: Element) -> dict:
    if el.repetition is not None:
        _check_repetition(el.repetition)
    return {
        **({"repetition": el.repetition} if el.repetition is not None else {}),
        **({"properties": named_properties_to_list(el.properties)} if el.properties else {}),
    }


def element_to_dict(el: Element) -> dict:
    """Serialize one element, tagged with its variant under ``"type"``."""
    if isinstance(el, Rectangle):
        return {
            "type": "rectangle",
            "layer": el.layer, "datatype": el.datatype,
            "x": el.x, "y": el.y,
            "width": el.width, "height": el.height,
            **_common(el),
        }
    if isinstance(el, Polygon):
        return {
            "type": "polygon",
            "layer": el.layer, "datatype": el.datatype,
            "x": el.x, "y": el.y,
            "points": [list(p) for p in el.points],
            **_common(el),
        }
    if isinstance(el, Path):
        return {
            "type": "path",
            "layer": el.layer, "datatype": el.datatype,
            "x": el.x, "y": el.y,
            "half_width": el.half_width,
            "extension_scheme": el.extension_scheme.value,
            "points": [list(p) for p in el.points],
            **({"start_extension": el.start_extension,
                "end_extension": el.end_extension}
               if el.extension_scheme is ExtensionScheme.EXPLICIT else {}),
            **_common(el),
        }
    if isinstance(el, Placement):
        return {
            "type": "placement",
            "cell_name": el.cell_name,
            "x": el.x, "y": el.y,
            **({"mirror": True} if el.mirror else {}),
            **_common(el),
        }
    if isinstance(el, Text):
        return {
            "type": "text",
            "string": el.string,
            "layer": el.layer, "texttype": el.texttype,
            "x": el.x, "y": el.y,
            **_common(el),
        }
    if isinstance(el, Circle):
        return {
            "type": "circle",
            "layer": el.layer, "datatype": el.datatype,
            "x": el.x, "y": el.y,
            "radius": el.radius,
            **_common(el),
        }
    raise TypeError(f"Unknown layout element: {type(el).__name__}")


def _parse_mirror(value: object) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Mirror flag must be true or false, got {value!r}")
    return value


def parse_element(data: dict) -> Element:
    """Parse one element dict back into its variant."""
    kind = data["type"]
    extra = {
        "repetition": data.get("repetition"),
        "properties": parse_named_properties(data.get("properties", [])),
    }
    if kind == "rectangle":
        return Rectangle(
            layer=data["layer"], datatype=data["datatype"],
            x=data["x"], y=data["y"],
            width=data["width"], height=data["height"],
            **extra,
        )
    if kind == "polygon":
        return Polygon(
            layer=data["layer"], datatype=data["datatype"],
            x=data["x"], y=data["y"],
            points=[tuple(p) for p in data["points"]],
            **extra,
        )
    if kind == "path":
        return Path(
            layer=data["layer"], datatype=data["datatype"],
            x=data["x"], y=data["y"],
            half_width=data["half_width"],
            extension_scheme=ExtensionScheme(data["extension_scheme"]),
            points=[tuple(p) for p in data["points"]],
            start_extension=data.get("start_extension", 0),
            end_extension=data.get("end_extension", 0),
            **extra,
        )
    if kind == "placement":
        return Placement(
            cell_name=data["cell_name"],
            x=data["x"], y=data["y"],
            mirror=_parse_mirror(data.get("mirror", False)),
            **extra,
        )
    if kind == "text":
        return Text(
            string=data["string"],
            layer=data["layer"], texttype=data["texttype"],
            x=data["x"], y=data["y"],
            **extra,
        )
    if kind == "circle":
        return Circle(
            layer=data["layer"], datatype=data["datatype"],
            x=data["x"], y=data["y"],
            radius=data["radius"],
            **extra,
        )
    raise ValueError(f"Unknown element type '{kind}'")


def document_to_dict(doc: LayoutDocument) -> dict:
    """Serialize a LayoutDocument to a JSON-safe dict."""
    return {
        "version": doc.version,
        "unit": doc.unit,
        # JSON object keys are strings; indices are restored on parse.
        "cell_names": {str(i): n for i, n in sorted(doc.names.cell_names.items())},
        "cells": [
            {
                "name": c.name,
                "elements": [element_to_dict(e) for e in c.elements],
            }
            for c in doc.cells
        ],
        "property_table": flat_properties_to_list(doc.property_table),
    }


def parse_document(data: dict) -> LayoutDocument:
    """Parse a document dict back into a LayoutDocument."""
    names = NameTable(cell_names={
        int(i): n for i, n in data.get("cell_names", {}).items()
    })
    cells = [
        Cell(
            name=c["name"],
            elements=[parse_element(e) for e in c.get("elements", [])],
        )
        for c in data.get("cells", [])
    ]
    return LayoutDocument(
        version=data["version"],
        unit=float(data["unit"]),
        names=names,
        cells=cells,
        property_table=parse_flat_properties(data.get("property_table", [])),
    )
