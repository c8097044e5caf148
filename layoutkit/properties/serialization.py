"""Property serialization — convert both property models to JSON-safe dicts."""

from __future__ import annotations

from .models import (
    FlatProperty, NamedProperty, PropertyValue, PropertyError,
    StringValue, IntegerValue, RealValue, BooleanValue,
)


_VALUE_TAGS: dict[type, str] = {
    StringValue: "string",
    IntegerValue: "integer",
    RealValue: "real",
    BooleanValue: "boolean",
}
_TAG_TYPES = {tag: cls for cls, tag in _VALUE_TAGS.items()}


def value_to_dict(value: PropertyValue) -> dict:
    """Tag a property value with its kind so it parses back to the same variant."""
    tag = _VALUE_TAGS.get(type(value))
    if tag is None:
        raise TypeError(f"Unknown property value variant: {type(value).__name__}")
    return {"type": tag, "value": value.value}


def parse_value(data: dict) -> PropertyValue:
    tag = data["type"]
    cls = _TAG_TYPES.get(tag)
    if cls is None:
        raise PropertyError("value tag", tag, f"expected one of {sorted(_TAG_TYPES)}")
    return cls(data["value"])


def named_properties_to_list(props: list[NamedProperty]) -> list[dict]:
    return [
        {"name": p.name, "values": [value_to_dict(v) for v in p.values]}
        for p in props
    ]


def parse_named_properties(data: list) -> list[NamedProperty]:
    return [
        NamedProperty(
            name=p["name"],
            values=[parse_value(v) for v in p.get("values", [])],
        )
        for p in data
    ]


def flat_properties_to_list(props: list[FlatProperty]) -> list[dict]:
    return [{"attribute": p.attribute, "value": p.value} for p in props]


def parse_flat_properties(data: list) -> list[FlatProperty]:
    return [
        FlatProperty(attribute=p["attribute"], value=p["value"])
        for p in data
    ]
