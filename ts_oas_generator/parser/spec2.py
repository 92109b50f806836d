"""Swagger 2.0 document models."""

from __future__ import annotations

import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _scalar_text(member: Any) -> Any:  # noqa: ANN401
    match member:
        case None:
            return "null"
        case bool():
            return "true" if member else "false"
        case int() | float():
            return str(member)
        case datetime.date():
            return member.isoformat()
        case _:
            return member


def _enum_members_to_text(value: Any) -> Any:  # noqa: ANN401
    """Read every scalar enum member as its text, as a YAML string list would."""
    if not isinstance(value, list):
        return value
    return [_scalar_text(member) for member in value]


EnumMembers = Annotated[list[str], BeforeValidator(_enum_members_to_text)]


class _Spec2Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


class Info(_Spec2Model):
    title: str | None = None
    version: str | None = None
    description: str | None = None


class Schema(_Spec2Model):
    """A Swagger 2.0 Schema Object.

    ``ref`` holds a JSON reference to another definition. ``properties``
    implies an object even when ``type`` is absent from the source.
    """

    ref: str | None = Field(default=None, alias="$ref")
    description: str | None = None
    schema_type: str | None = Field(default=None, alias="type")
    format: str | None = None
    enum_values: EnumMembers | None = Field(default=None, alias="enum")
    required: list[str] | None = None
    items: Schema | None = None
    properties: dict[str, Schema] | None = None
    all_of: list[Schema] | None = Field(default=None, alias="allOf")


class SwaggerDocument(_Spec2Model):
    """Top-level Swagger 2.0 document. Only ``definitions`` is translated."""

    swagger: str
    info: Info | None = None
    definitions: dict[str, Schema] | None = None
