"""
OpenAPI 3.0 schema lowering.

Structurally parallel to the Swagger 2.0 lowering, with two differences:
enum members keep their literal kind (numbers, booleans and null survive),
and an unrecognised ``type`` is an error instead of ``any``.
"""

from __future__ import annotations

import logging

from ts_oas_generator.constants import (
    TS_ANY,
    TS_BOOLEAN,
    TS_DATE,
    TS_NUMBER,
    TS_STRING,
    TS_UNKNOWN,
    V3_DATE_FORMATS,
    V3_REFERENCE_PREFIX,
)
from ts_oas_generator.errors import InvalidReferenceError, UnsupportedSchemaShapeError
from ts_oas_generator.model import (
    ArrayType,
    Field,
    LiteralType,
    NamedType,
    ProductType,
    RecordType,
    SumType,
    TsType,
    value_from_document,
)
from ts_oas_generator.parser.spec3 import OpenApiDocument, Reference, Schema

logger = logging.getLogger(__name__)


def parse_reference(reference: Reference) -> str:
    """Extract the schema name from a ``#/components/schemas/`` reference."""
    if not reference.ref.startswith(V3_REFERENCE_PREFIX):
        raise InvalidReferenceError(reference.ref, V3_REFERENCE_PREFIX)
    return reference.ref[len(V3_REFERENCE_PREFIX) :]


def slot_to_ts_type(slot: Reference | Schema) -> TsType:
    """Lower a reference-or-inline schema slot."""
    if isinstance(slot, Reference):
        return NamedType(parse_reference(slot))
    return schema_to_ts_type(slot)


def enum_to_ts_type(schema: Schema) -> SumType:
    return SumType(tuple(LiteralType(value_from_document(v)) for v in schema.enum_values or ()))


def _array_to_ts_type(schema: Schema) -> ArrayType:
    if schema.items is None:
        msg = "Unable to convert array schema without 'items'"
        raise UnsupportedSchemaShapeError(msg, schema)
    return ArrayType(slot_to_ts_type(schema.items))


def _string_to_ts_type(schema: Schema) -> TsType:
    if schema.enum_values is not None:
        return enum_to_ts_type(schema)
    if schema.format in V3_DATE_FORMATS:
        return NamedType(TS_DATE)
    return NamedType(TS_STRING)


def schema_to_record(schema: Schema) -> RecordType:
    required = set(schema.required or ())
    return RecordType.from_fields(
        Field(name, name in required, slot_to_ts_type(slot)) for name, slot in (schema.properties or {}).items()
    )


def schema_to_ts_type(schema: Schema) -> TsType:
    """Lower an OpenAPI 3.0 schema to a TypeScript type.

    Raises:
        InvalidReferenceError: If a nested reference is not a local schema.
        UnsupportedSchemaShapeError: If ``type`` is unrecognised or an array
            has no ``items``.
    """
    if schema.all_of is not None:
        return ProductType(tuple(slot_to_ts_type(member) for member in schema.all_of))

    if schema.schema_type is None:
        if schema.enum_values is not None:
            return enum_to_ts_type(schema)
        if schema.properties is not None:
            return schema_to_record(schema)
        return NamedType(TS_ANY)

    match schema.schema_type:
        case "array":
            return _array_to_ts_type(schema)
        case "string":
            return _string_to_ts_type(schema)
        case "object":
            return schema_to_record(schema)
        case "integer" | "number":
            return NamedType(TS_NUMBER)
        case "boolean":
            return NamedType(TS_BOOLEAN)
        case "unknown":
            return NamedType(TS_UNKNOWN)
        case "enum":
            return enum_to_ts_type(schema)
        case unsupported:
            msg = f"Attempting to parse schema with unknown type '{unsupported}'"
            raise UnsupportedSchemaShapeError(msg, schema)


def translate_component_schemas(document: OpenApiDocument) -> list[tuple[str, TsType]]:
    """Lower every entry of ``components.schemas`` in declaration order."""
    if document.components is None or document.components.schemas is None:
        logger.debug("Document has no components.schemas")
        return []
    return [(name, slot_to_ts_type(slot)) for name, slot in document.components.schemas.items()]
