"""
TypeScript Code Generator Module

This module provides Jinja2-based rendering of TypeScript type declarations
from Swagger 2.0 and OpenAPI 3.0 documents.
"""

from .template_engine import DeclarationFilter, TypeScriptCodeGenerator, TypeScriptTemplateEngine

__all__ = [
    "DeclarationFilter",
    "TypeScriptCodeGenerator",
    "TypeScriptTemplateEngine",
]
