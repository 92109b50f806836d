"""
OpenAPI Parser Module for TypeScript Type Generation

This module provides the Swagger 2.0 / OpenAPI 3.0 document models, version
detection, and the per-version lowering into the TypeScript type algebra.
"""

from .oas_parser import (
    Declaration,
    Document,
    OASParser,
    load_document_data,
    translate_document,
)
from .spec2 import SwaggerDocument
from .spec3 import OpenApiDocument

__all__ = [
    "Declaration",
    "Document",
    "OASParser",
    "OpenApiDocument",
    "SwaggerDocument",
    "load_document_data",
    "translate_document",
]
