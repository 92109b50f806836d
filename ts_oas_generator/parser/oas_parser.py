"""
OpenAPI Specification Parser for TypeScript Type Generation.

This module loads Swagger 2.0 and OpenAPI 3.0 documents from YAML or JSON,
detects the document version by shape, and lowers its named schemas into
the TypeScript type algebra.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ts_oas_generator.errors import DeserializationError
from ts_oas_generator.model import TsType
from ts_oas_generator.parser.spec2 import SwaggerDocument
from ts_oas_generator.parser.spec3 import OpenApiDocument
from ts_oas_generator.parser.translate_v2 import translate_definitions
from ts_oas_generator.parser.translate_v3 import translate_component_schemas

logger = logging.getLogger(__name__)

Document = Union[SwaggerDocument, OpenApiDocument]

# Candidate shapes, tried in order; the first that validates wins
_DOCUMENT_SHAPES: tuple[type[SwaggerDocument] | type[OpenApiDocument], ...] = (SwaggerDocument, OpenApiDocument)


@dataclass(frozen=True)
class Declaration:
    """A named type to be emitted as ``export type {name} = ...;``."""

    name: str
    ts_type: TsType


def load_document_data(text: str) -> Any:  # noqa: ANN401
    """Load YAML or JSON text into plain Python data.

    JSON is a subset of YAML, but JSON documents are loaded with the JSON
    parser so tab indentation and similar JSON-only leniency is accepted.
    """
    try:
        if text.lstrip().startswith("{"):
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Specification is neither valid JSON nor YAML: {e}"
        raise DeserializationError(msg) from e


class OASParser:
    """Parser for Swagger 2.0 and OpenAPI 3.0 specifications."""

    def parse_file(self, file_path: str | Path) -> Document:
        """Parse a specification from a JSON or YAML file."""
        path = Path(file_path)
        return self.parse_bytes(path.read_bytes())

    def parse_bytes(self, raw: bytes) -> Document:
        """Parse a specification from raw UTF-8 bytes."""
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            msg = f"Specification is not valid UTF-8: {e}"
            raise DeserializationError(msg) from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> Document:
        """Parse a specification from YAML or JSON text."""
        return self.parse_dict(load_document_data(text))

    def parse_dict(self, spec_dict: Any) -> Document:  # noqa: ANN401
        """Match loaded data against each document shape in turn."""
        if not isinstance(spec_dict, dict):
            msg = f"Specification root must be a mapping, got {type(spec_dict).__name__}"
            raise DeserializationError(msg)

        failures: list[Any] = []
        for shape in _DOCUMENT_SHAPES:
            try:
                document = shape.model_validate(spec_dict)
            except ValidationError as e:
                logger.debug("Document does not match %s: %d errors", shape.__name__, e.error_count())
                failures.append({"shape": shape.__name__, "errors": e.errors()})
                continue
            logger.debug("Parsed specification as %s", shape.__name__)
            return document

        msg = "Specification matches neither the Swagger 2.0 nor the OpenAPI 3.0 document shape"
        raise DeserializationError(msg, failures)


def translate_document(document: Document) -> list[Declaration]:
    """Lower every named schema of ``document`` using its version's translator."""
    if isinstance(document, SwaggerDocument):
        pairs = translate_definitions(document)
    else:
        pairs = translate_component_schemas(document)
    logger.debug("Translated %d named schemas", len(pairs))
    return [Declaration(name, ts_type) for name, ts_type in pairs]
