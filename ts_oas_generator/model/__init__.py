"""
Intermediate Type Model

Literal values and the structural type algebra shared by the v2 and v3
translators and the TypeScript renderer.
"""

from .types import (
    ArrayType,
    Field,
    LiteralType,
    NamedType,
    ProductType,
    RecordType,
    SumType,
    TsType,
    exclude_named,
    prune_empty,
    render_type,
)
from .values import (
    BoolValue,
    ListValue,
    MapValue,
    NullValue,
    NumValue,
    StrValue,
    Value,
    render_value,
    value_from_document,
)

__all__ = [
    "ArrayType",
    "BoolValue",
    "Field",
    "ListValue",
    "LiteralType",
    "MapValue",
    "NamedType",
    "NullValue",
    "NumValue",
    "ProductType",
    "RecordType",
    "StrValue",
    "SumType",
    "TsType",
    "Value",
    "exclude_named",
    "prune_empty",
    "render_type",
    "render_value",
    "value_from_document",
]
