"""
Schema model: the tree of type descriptions consumed by the printer.
"""

from __future__ import annotations

from .loader import SchemaLoader, load_schema
from .nodes import (
    Array,
    Bool,
    Enum,
    Example,
    Field,
    Float,
    Integer,
    Map,
    Optional,
    String,
    Struct,
    Tag,
    TagAdjacent,
    TagExternal,
    TagInternal,
    TagNone,
    Tuple,
    Type,
    TypeKind,
    Variant,
    is_field_bearing,
)

__all__ = [
    "Array",
    "Bool",
    "Enum",
    "Example",
    "Field",
    "Float",
    "Integer",
    "Map",
    "Optional",
    "SchemaLoader",
    "String",
    "Struct",
    "Tag",
    "TagAdjacent",
    "TagExternal",
    "TagInternal",
    "TagNone",
    "Tuple",
    "Type",
    "TypeKind",
    "Variant",
    "is_field_bearing",
    "load_schema",
]
