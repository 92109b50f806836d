"""
Swagger 2.0 schema lowering.

Converts ``definitions`` entries into the TypeScript type algebra. Unknown
``type`` values are widened to ``any`` rather than rejected.
"""

from __future__ import annotations

from ts_oas_generator.constants import (
    TS_ANY,
    TS_BOOLEAN,
    TS_DATE,
    TS_NUMBER,
    TS_STRING,
    V2_DATE_FORMATS,
    V2_REFERENCE_PREFIX,
)
from ts_oas_generator.errors import InvalidReferenceError
from ts_oas_generator.model import (
    ArrayType,
    Field,
    LiteralType,
    NamedType,
    ProductType,
    RecordType,
    StrValue,
    SumType,
    TsType,
)
from ts_oas_generator.parser.spec2 import Schema, SwaggerDocument


def parse_reference(reference: str) -> str:
    """Extract the definition name from a v2 ``$ref``.

    Args:
        reference: The $ref value (e.g., "#/definitions/Pet").

    Returns:
        The referenced name (e.g., "Pet").

    Raises:
        InvalidReferenceError: If the reference is not a local definition.
    """
    if not reference.startswith(V2_REFERENCE_PREFIX):
        raise InvalidReferenceError(reference, V2_REFERENCE_PREFIX)
    return reference[len(V2_REFERENCE_PREFIX) :]


def schema_to_record(schema: Schema) -> RecordType:
    """Build an inline record from ``properties``; absent ``required`` means all optional."""
    required = set(schema.required or ())
    return RecordType.from_fields(
        Field(name, name in required, schema_to_ts_type(prop)) for name, prop in (schema.properties or {}).items()
    )


def _string_to_ts_type(schema: Schema) -> TsType:
    if schema.enum_values is not None:
        return SumType(tuple(LiteralType(StrValue(v)) for v in schema.enum_values))
    if schema.format in V2_DATE_FORMATS:
        return NamedType(TS_DATE)
    return NamedType(TS_STRING)


def schema_to_ts_type(schema: Schema) -> TsType:
    """Lower a Swagger 2.0 schema to a TypeScript type."""
    if schema.ref is not None:
        return NamedType(parse_reference(schema.ref))
    if schema.all_of is not None:
        return ProductType(tuple(schema_to_ts_type(member) for member in schema.all_of))
    if schema.schema_type is None:
        return RecordType()

    match schema.schema_type:
        case "integer" | "number":
            return NamedType(TS_NUMBER)
        case "string":
            return _string_to_ts_type(schema)
        case "boolean":
            return NamedType(TS_BOOLEAN)
        case "array":
            if schema.items is None:
                return NamedType(TS_ANY)
            return ArrayType(schema_to_ts_type(schema.items))
        case "object":
            return schema_to_record(schema)
        case _:
            return NamedType(TS_ANY)


def translate_definitions(document: SwaggerDocument) -> list[tuple[str, TsType]]:
    """Lower every entry of ``definitions`` in declaration order."""
    return [(name, schema_to_ts_type(schema)) for name, schema in (document.definitions or {}).items()]
