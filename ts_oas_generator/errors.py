"""Exception hierarchy for the TypeScript OAS generator."""

from __future__ import annotations

from typing import Any


class TsOasGeneratorError(Exception):
    """Base class for all generator errors."""


class DeserializationError(TsOasGeneratorError):
    """Input could not be loaded as a Swagger 2.0 or OpenAPI 3.0 document."""

    def __init__(self, message: str, details: list[Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class InvalidReferenceError(TsOasGeneratorError):
    """A ``$ref`` does not point at the local schema section of its document."""

    def __init__(self, reference: str, expected_prefix: str) -> None:
        msg = f"Unable to parse reference '{reference}': expected prefix '{expected_prefix}'"
        super().__init__(msg)
        self.reference = reference
        self.expected_prefix = expected_prefix


class UnsupportedSchemaShapeError(TsOasGeneratorError):
    """A schema node cannot be lowered to a TypeScript type."""

    def __init__(self, message: str, schema: Any = None) -> None:  # noqa: ANN401
        super().__init__(message)
        self.schema = schema


class SpecFetchError(TsOasGeneratorError):
    """Fetching a remote specification over HTTP failed."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.status_code = status_code
