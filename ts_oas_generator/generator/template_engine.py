"""
TypeScript Template Engine for OpenAPI Type Generation

This module uses Jinja2 templates to render TypeScript type declarations
from parsed Swagger 2.0 / OpenAPI 3.0 documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ts_oas_generator.constants import DEFAULT_TEMPLATE_NAME, GENERATED_BANNER
from ts_oas_generator.generator.filters import FILTERS, is_valid_ts_identifier
from ts_oas_generator.model import exclude_named, prune_empty
from ts_oas_generator.parser.oas_parser import Declaration, Document, translate_document

logger = logging.getLogger(__name__)


class DeclarationFilter:
    """Applies the optional pruning and exclusion passes to declarations."""

    def __init__(self, *, skip_empty_types: bool = False, excluded_type_names: Iterable[str] = ()) -> None:
        self.skip_empty_types = skip_empty_types
        self.excluded_type_names = frozenset(excluded_type_names)

    def apply(self, declaration: Declaration) -> Declaration | None:
        """Filter one declaration; ``None`` means it is dropped from the output."""
        if declaration.name in self.excluded_type_names:
            logger.debug("Skipping excluded type %s", declaration.name)
            return None
        ts_type = declaration.ts_type
        if self.skip_empty_types:
            ts_type = prune_empty(ts_type)
            if ts_type is None:
                logger.debug("Skipping empty type %s", declaration.name)
                return None
        ts_type = exclude_named(ts_type, self.excluded_type_names)
        if ts_type is None:
            logger.debug("Skipping type %s: only excluded names remained", declaration.name)
            return None
        return Declaration(declaration.name, ts_type)

    def filter_all(self, declarations: Iterable[Declaration]) -> list[Declaration]:
        return [kept for kept in (self.apply(d) for d in declarations) if kept is not None]


class TypeScriptTemplateEngine:
    """Template engine for generating TypeScript code."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine."""
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)


class TypeScriptCodeGenerator:
    """Main code generator for TypeScript type declarations."""

    def __init__(self, template_engine: TypeScriptTemplateEngine | None = None) -> None:
        """Initialize the code generator."""
        self.template_engine = template_engine or TypeScriptTemplateEngine()

    def generate_types(
        self,
        document: Document,
        *,
        skip_empty_types: bool = False,
        excluded_type_names: Iterable[str] = (),
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> str:
        """Render every named schema of ``document`` as ``export type`` declarations.

        Args:
            document: A parsed Swagger 2.0 or OpenAPI 3.0 document.
            skip_empty_types: Drop types that are empty once pruned.
            excluded_type_names: Names whose references are removed; types
                left with nothing are dropped.
            template_name: Template to render, relative to the template dir.

        Returns:
            The generated TypeScript source, starting with a banner comment.
        """
        declaration_filter = DeclarationFilter(
            skip_empty_types=skip_empty_types,
            excluded_type_names=excluded_type_names,
        )
        declarations = declaration_filter.filter_all(translate_document(document))

        for declaration in declarations:
            if not is_valid_ts_identifier(declaration.name):
                logger.warning("Type name %r is not a valid TypeScript identifier", declaration.name)

        context = {
            "banner": GENERATED_BANNER,
            "declarations": declarations,
        }
        return self.template_engine.render_template(template_name, context)
