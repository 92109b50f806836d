"""
TypeScript OpenAPI Type Generator

Translates Swagger 2.0 and OpenAPI 3.0 schema definitions into TypeScript
``export type`` declarations through a small structural type algebra.
"""

from .errors import (
    DeserializationError,
    InvalidReferenceError,
    SpecFetchError,
    TsOasGeneratorError,
    UnsupportedSchemaShapeError,
)
from .generator import TypeScriptCodeGenerator, TypeScriptTemplateEngine
from .parser import Declaration, Document, OASParser, translate_document

__version__ = "1.0.0"

__all__ = [
    "Declaration",
    "DeserializationError",
    "Document",
    "InvalidReferenceError",
    "OASParser",
    "SpecFetchError",
    "TsOasGeneratorError",
    "TypeScriptCodeGenerator",
    "TypeScriptTemplateEngine",
    "UnsupportedSchemaShapeError",
    "translate_document",
]
