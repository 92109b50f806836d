"""
Literal value model.

Enum members and defaults found in a specification are captured as immutable
``Value`` trees so they can be rendered verbatim as TypeScript literals.
"""

from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

_INVALID_KEY_TYPE_WARNING = (
    "Dropping mapping entry with non-string key %r: only string keys are valid in a TypeScript object literal"
)


@dataclass(frozen=True)
class NullValue:
    """The ``null`` literal."""


@dataclass(frozen=True)
class StrValue:
    value: str


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumValue:
    value: float


@dataclass(frozen=True)
class ListValue:
    items: tuple[Value, ...] = ()


@dataclass(frozen=True)
class MapValue:
    entries: tuple[tuple[Value, Value], ...] = ()


Value = Union[NullValue, StrValue, BoolValue, NumValue, ListValue, MapValue]


def value_from_document(obj: Any) -> Value:  # noqa: ANN401
    """Convert a loaded YAML/JSON object into a ``Value``.

    Args:
        obj: A scalar, sequence, or mapping produced by the YAML/JSON loader.

    Returns:
        The equivalent ``Value`` tree.

    Raises:
        TypeError: If ``obj`` is not a YAML/JSON data type.
    """
    match obj:
        case None:
            return NullValue()
        # bool is a subclass of int, so it must be matched first
        case bool():
            return BoolValue(obj)
        case int() | float():
            return NumValue(float(obj))
        case str():
            return StrValue(obj)
        case datetime.date():
            # YAML timestamps load as date/datetime objects
            return StrValue(obj.isoformat())
        case list() | tuple():
            return ListValue(tuple(value_from_document(item) for item in obj))
        case dict():
            entries = []
            for key, item in obj.items():
                if not isinstance(key, str):
                    logger.warning(_INVALID_KEY_TYPE_WARNING, key)
                    continue
                entries.append((StrValue(key), value_from_document(item)))
            return MapValue(tuple(entries))
        case _:
            msg = f"Cannot convert {type(obj).__name__} to a literal value"
            raise TypeError(msg)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _quote_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_value(value: Value) -> str:
    """Render a ``Value`` as TypeScript literal text.

    Examples:
        >>> render_value(StrValue("a"))
        "'a'"
        >>> render_value(NumValue(1.0))
        '1'
        >>> render_value(ListValue((BoolValue(True), NullValue())))
        '[true,null]'
    """
    match value:
        case NullValue():
            return "null"
        case StrValue(text):
            return _quote_string(text)
        case BoolValue(flag):
            return "true" if flag else "false"
        case NumValue(number):
            return _format_number(number)
        case ListValue(items):
            return "[" + ",".join(render_value(item) for item in items) + "]"
        case MapValue(entries):
            return "{" + ",".join(f"{render_value(k)} : {render_value(v)}" for k, v in entries) + "}"
    msg = f"Unknown value variant: {value!r}"
    raise TypeError(msg)
