"""Properties — typed metadata attached to layout records.

Submodules:
  models        Value variants, NamedProperty, FlatProperty, PropertyError.
  builders      Chained builders for both property models.
  manager       Attribute-code index over flat properties.
  serialization JSON conversion for both property models.
"""

from .models import (
    StringValue, IntegerValue, RealValue, BooleanValue, PropertyValue,
    NamedProperty, FlatProperty, PropertyError, value_of,
)
from .builders import FlatPropertyBuilder, NamedPropertyBuilder
from .manager import PropertyManager
from .serialization import (
    value_to_dict, parse_value,
    named_properties_to_list, parse_named_properties,
    flat_properties_to_list, parse_flat_properties,
)

__all__ = [
    # Models
    "StringValue", "IntegerValue", "RealValue", "BooleanValue", "PropertyValue",
    "NamedProperty", "FlatProperty", "PropertyError", "value_of",
    # Builders / Manager
    "FlatPropertyBuilder", "NamedPropertyBuilder", "PropertyManager",
    # Serialization
    "value_to_dict", "parse_value",
    "named_properties_to_list", "parse_named_properties",
    "flat_properties_to_list", "parse_flat_properties",
]
