"""
TypeScript type algebra.

Every schema dialect is lowered into this small set of immutable types, which
can then be filtered and rendered as TypeScript type expressions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union

from ts_oas_generator.constants import TS_NEVER, TS_UNKNOWN
from ts_oas_generator.model.values import Value, render_value


@dataclass(frozen=True)
class ArrayType:
    """Homogeneous array of ``element``."""

    element: TsType


@dataclass(frozen=True)
class ProductType:
    """Intersection of ``members`` (``allOf``)."""

    members: tuple[TsType, ...] = ()


@dataclass(frozen=True)
class SumType:
    """Union of ``members`` (enums as literal unions)."""

    members: tuple[TsType, ...] = ()


@dataclass(frozen=True)
class NamedType:
    """Reference to a type declared elsewhere, rendered verbatim."""

    name: str


@dataclass(frozen=True)
class Field:
    name: str
    required: bool
    type: TsType


@dataclass(frozen=True)
class RecordType:
    """Inline object type. Field order follows declaration order."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            msg = f"Duplicate field names in record: {names}"
            raise ValueError(msg)

    @classmethod
    def from_fields(cls, fields: Iterable[Field]) -> RecordType:
        return cls(tuple(fields))

    @property
    def is_empty(self) -> bool:
        return not self.fields


@dataclass(frozen=True)
class LiteralType:
    """Type inhabited by exactly one literal value."""

    value: Value


TsType = Union[ArrayType, ProductType, SumType, NamedType, RecordType, LiteralType]


def _quote_field_name(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_field(field: Field) -> str:
    optional = " ?" if not field.required else ""
    return f"{_quote_field_name(field.name)}{optional} : {render_type(field.type)};"


def render_type(ts_type: TsType) -> str:
    """Render a type as TypeScript type text.

    Examples:
        >>> render_type(ArrayType(NamedType("Pet")))
        'Pet[]'
        >>> render_type(RecordType((Field("id", True, NamedType("number")),)))
        '{"id" : number;}'
    """
    match ts_type:
        case ArrayType(element):
            inner = render_type(element)
            if isinstance(element, (SumType, ProductType)) and element.members:
                inner = f"({inner})"
            return f"{inner}[]"
        case ProductType(()):
            return TS_UNKNOWN
        case SumType(()):
            return TS_NEVER
        case ProductType(members):
            return " & ".join(render_type(m) for m in members)
        case SumType(members):
            return "|".join(render_type(m) for m in members)
        case NamedType(name):
            return name
        case RecordType(fields):
            return "{" + "".join(render_field(f) for f in fields) + "}"
        case LiteralType(value):
            return render_value(value)
    msg = f"Unknown type variant: {ts_type!r}"
    raise TypeError(msg)


def _filter_type(
    ts_type: TsType,
    keep_named: Callable[[NamedType], bool],
    *,
    drop_empty: bool,
) -> TsType | None:
    """Rebuild ``ts_type`` without the leaves rejected by ``keep_named``.

    A composite collapses to ``None`` when nothing survives and either
    ``drop_empty`` is set or at least one of its children was removed.
    """
    match ts_type:
        case ArrayType(element):
            kept = _filter_type(element, keep_named, drop_empty=drop_empty)
            return None if kept is None else ArrayType(kept)
        case ProductType(members) | SumType(members):
            survivors = [
                kept
                for kept in (_filter_type(m, keep_named, drop_empty=drop_empty) for m in members)
                if kept is not None
            ]
            if not survivors and (drop_empty or members):
                return None
            return type(ts_type)(tuple(survivors))
        case RecordType(fields):
            kept_fields = []
            for f in fields:
                kept = _filter_type(f.type, keep_named, drop_empty=drop_empty)
                if kept is not None:
                    kept_fields.append(Field(f.name, f.required, kept))
            record = RecordType(tuple(kept_fields))
            if record.is_empty and (drop_empty or fields):
                return None
            return record
        case NamedType():
            return ts_type if keep_named(ts_type) else None
        case LiteralType():
            return ts_type
    msg = f"Unknown type variant: {ts_type!r}"
    raise TypeError(msg)


def prune_empty(ts_type: TsType) -> TsType | None:
    """Strip empty records, unions and intersections; ``None`` if nothing is left."""
    return _filter_type(ts_type, lambda _: True, drop_empty=True)


def exclude_named(ts_type: TsType, excluded_names: Iterable[str]) -> TsType | None:
    """Remove references to ``excluded_names``; ``None`` if that empties the type."""
    excluded = frozenset(excluded_names)
    return _filter_type(ts_type, lambda named: named.name not in excluded, drop_empty=False)
