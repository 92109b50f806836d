"""
Jinja2 filters for TypeScript type generation.

This module provides the custom filters registered on the template
environment used to render type declarations.
"""

from __future__ import annotations

import re

from ts_oas_generator.model import TsType, render_type

_TS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def ts_type(value: TsType) -> str:
    """Render a type from the intermediate model as TypeScript type text.

    Args:
        value: The type to render.

    Returns:
        TypeScript type expression.
    """
    return render_type(value)


def is_valid_ts_identifier(name: str) -> bool:
    """Check if a string is a valid TypeScript identifier.

    Examples:
        >>> is_valid_ts_identifier("Pet")
        True
        >>> is_valid_ts_identifier("pet-store")
        False
    """
    return bool(_TS_IDENTIFIER_PATTERN.match(name))


def ts_line_comment(text: str) -> str:
    """Prefix every line of ``text`` with ``// ``."""
    if not text:
        return ""
    return "\n".join(line if line.startswith("//") else f"// {line}" for line in text.strip().split("\n"))


# Register filters that will be available in Jinja templates
FILTERS = {
    "ts_type": ts_type,
    "is_valid_ts_identifier": is_valid_ts_identifier,
    "ts_line_comment": ts_line_comment,
}
