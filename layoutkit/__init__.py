"""layoutkit — in-memory model of IC layout interchange data.

Subpackages:
  properties    Flat (attribute-coded) and named (typed, multi-valued) properties.
  layout        Geometric elements, cells, and the layout document.

Modules:
  config        Format limits shared by validation and the engine.
  engine        Serialization engine boundary and the JSON reference engine.
"""

__version__ = "0.1.0"
