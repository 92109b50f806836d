"""Shared constants for TypeScript type generation."""

from typing import Final

# Local reference prefixes per document version
V2_REFERENCE_PREFIX: Final = "#/definitions/"
V3_REFERENCE_PREFIX: Final = "#/components/schemas/"

# TypeScript names emitted for primitive schemas
TS_NUMBER: Final = "number"
TS_STRING: Final = "string"
TS_BOOLEAN: Final = "boolean"
TS_DATE: Final = "Date"
TS_ANY: Final = "any"
TS_UNKNOWN: Final = "unknown"
TS_NEVER: Final = "never"

# String formats rendered as Date
V2_DATE_FORMATS: Final = frozenset({"date-time"})
V3_DATE_FORMATS: Final = frozenset({"date", "date-time"})

GENERATED_BANNER: Final = "// This file was generated by ts-oas-generator. Do not edit by hand."

DEFAULT_TEMPLATE_NAME: Final = "types.ts.j2"

# CLI exit codes
EXIT_SUCCESS: Final = 0
EXIT_FILE_NOT_FOUND: Final = 1
EXIT_INVALID_SPEC: Final = 2
EXIT_GENERATION_ERROR: Final = 3
EXIT_FETCH_ERROR: Final = 4

DEFAULT_FETCH_TIMEOUT: Final = 30
FETCH_RETRY_STATUSES: Final = (500, 502, 503, 504)
