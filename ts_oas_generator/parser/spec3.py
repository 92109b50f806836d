"""
OpenAPI 3.0 document models.

Every slot that may hold either a ``$ref`` or an inline object is an explicit
``Reference | T`` union. References are never resolved.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Spec3Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


def _drop_extensions(value: Any) -> Any:  # noqa: ANN401
    """Remove ``x-`` specification extensions from a map of named objects."""
    if not isinstance(value, dict):
        return value
    return {key: item for key, item in value.items() if not (isinstance(key, str) and key.startswith("x-"))}


class Reference(_Spec3Model):
    ref: str = Field(alias="$ref")


class Schema(_Spec3Model):
    """An OpenAPI 3.0 Schema Object.

    ``oneOf``, ``anyOf``, ``not`` and ``additionalProperties`` are accepted
    so documents using them validate, but they are not translated.
    """

    title: str | None = None
    description: str | None = None
    multiple_of: float | None = Field(default=None, alias="multipleOf")
    required: list[str] | None = None
    enum_values: list[Any] | None = Field(default=None, alias="enum")
    schema_type: str | None = Field(default=None, alias="type")
    format: str | None = None
    nullable: bool | None = None
    default: Any = None
    one_of: list[SchemaOrReference] | None = Field(default=None, alias="oneOf")
    all_of: list[SchemaOrReference] | None = Field(default=None, alias="allOf")
    any_of: list[SchemaOrReference] | None = Field(default=None, alias="anyOf")
    not_: SchemaOrReference | None = Field(default=None, alias="not")
    items: SchemaOrReference | None = None
    properties: dict[str, SchemaOrReference] | None = None
    additional_properties: AdditionalProperties | None = Field(default=None, alias="additionalProperties")


# A ``$ref`` key always selects the reference branch, even with sibling keys
SchemaOrReference = Annotated[Union[Reference, Schema], Field(union_mode="left_to_right")]
AdditionalProperties = Annotated[Union[bool, Reference, Schema], Field(union_mode="left_to_right")]

Schema.model_rebuild()


class ParameterLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class Parameter(_Spec3Model):
    name: str
    location: ParameterLocation = Field(alias="in")
    required: bool | None = None
    deprecated: bool | None = None
    param_schema: SchemaOrReference | None = Field(default=None, alias="schema")


class Header(_Spec3Model):
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    header_schema: SchemaOrReference | None = Field(default=None, alias="schema")


class MediaType(_Spec3Model):
    media_schema: SchemaOrReference | None = Field(default=None, alias="schema")


class Response(_Spec3Model):
    description: str | None = None
    headers: dict[str, Annotated[Union[Reference, Header], Field(union_mode="left_to_right")]] | None = None
    content: dict[str, MediaType] | None = None


class Operation(_Spec3Model):
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    parameters: list[Annotated[Union[Reference, Parameter], Field(union_mode="left_to_right")]] | None = None
    responses: dict[str, Annotated[Union[Reference, Response], Field(union_mode="left_to_right")]]

    @field_validator("responses", mode="before")
    @classmethod
    def drop_response_extensions(cls, value: Any) -> Any:  # noqa: ANN401
        return _drop_extensions(value)


class PathItem(_Spec3Model):
    ref: str | None = Field(default=None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    parameters: list[Annotated[Union[Reference, Parameter], Field(union_mode="left_to_right")]] | None = None


class Contact(_Spec3Model):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(_Spec3Model):
    name: str
    url: str | None = None


class Info(_Spec3Model):
    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None


class Components(_Spec3Model):
    """Reusable objects. Only ``schemas`` is translated."""

    schemas: dict[str, SchemaOrReference] | None = None


class OpenApiDocument(_Spec3Model):
    """Top-level OpenAPI 3.0 document."""

    openapi: str
    info: Info
    paths: dict[str, PathItem]
    components: Components | None = None

    @field_validator("paths", mode="before")
    @classmethod
    def drop_path_extensions(cls, value: Any) -> Any:  # noqa: ANN401
        return _drop_extensions(value)
