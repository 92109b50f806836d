"""Tests for the literal value model."""

import datetime
import logging

import pytest

from ts_oas_generator.model.values import (
    BoolValue,
    ListValue,
    MapValue,
    NullValue,
    NumValue,
    StrValue,
    render_value,
    value_from_document,
)


class TestValueFromDocument:
    """Conversion of loaded YAML/JSON data into values."""

    @pytest.mark.parametrize(
        ("obj", "expected"),
        [
            (None, NullValue()),
            (True, BoolValue(True)),
            (False, BoolValue(False)),
            (3, NumValue(3.0)),
            (2.5, NumValue(2.5)),
            ("cat", StrValue("cat")),
            (datetime.date(2020, 1, 2), StrValue("2020-01-02")),
        ],
    )
    def test_scalars(self, obj: object, expected: object) -> None:
        """Each scalar maps onto its own value variant."""
        assert value_from_document(obj) == expected

    def test_bool_is_not_a_number(self) -> None:
        """Booleans must not be captured as numbers even though bool subclasses int."""
        assert isinstance(value_from_document(True), BoolValue)

    def test_nested_collections(self) -> None:
        """Sequences and mappings convert recursively."""
        value = value_from_document({"a": [1, None], "b": {"c": "d"}})

        assert value == MapValue(
            (
                (StrValue("a"), ListValue((NumValue(1.0), NullValue()))),
                (StrValue("b"), MapValue(((StrValue("c"), StrValue("d")),))),
            )
        )

    def test_non_string_keys_are_dropped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Only string keys survive; dropped keys are logged."""
        with caplog.at_level(logging.WARNING, logger="ts_oas_generator.model.values"):
            value = value_from_document({1: "one", "two": 2})

        assert value == MapValue(((StrValue("two"), NumValue(2.0)),))
        assert "non-string key 1" in caplog.text

    def test_unsupported_object(self) -> None:
        with pytest.raises(TypeError):
            value_from_document(object())


class TestRenderValue:
    """TypeScript literal rendering."""

    def test_string_is_single_quoted(self) -> None:
        assert render_value(StrValue("available")) == "'available'"

    def test_string_quotes_are_escaped(self) -> None:
        assert render_value(StrValue("it's")) == "'it\\'s'"

    def test_integral_numbers_have_no_fraction(self) -> None:
        """Whole numbers render without a trailing .0."""
        assert render_value(NumValue(1.0)) == "1"
        assert render_value(NumValue(-42.0)) == "-42"

    def test_fractional_numbers(self) -> None:
        assert render_value(NumValue(0.5)) == "0.5"

    def test_non_finite_numbers(self) -> None:
        """YAML .inf and .nan become the TypeScript global constants."""
        assert render_value(value_from_document(float("inf"))) == "Infinity"
        assert render_value(NumValue(float("-inf"))) == "-Infinity"
        assert render_value(NumValue(float("nan"))) == "NaN"

    def test_booleans_and_null(self) -> None:
        assert render_value(BoolValue(True)) == "true"
        assert render_value(BoolValue(False)) == "false"
        assert render_value(NullValue()) == "null"

    def test_array(self) -> None:
        assert render_value(ListValue((NumValue(1.0), StrValue("a")))) == "[1,'a']"

    def test_object(self) -> None:
        value = MapValue(((StrValue("a"), NumValue(1.0)), (StrValue("b"), BoolValue(False))))
        assert render_value(value) == "{'a' : 1,'b' : false}"

    @pytest.mark.parametrize(
        ("obj", "category_check"),
        [
            ("x", lambda text: text.startswith("'") and text.endswith("'")),
            (7, lambda text: float(text) == 7),
            (1.25, lambda text: float(text) == 1.25),
            (True, lambda text: text == "true"),
            (None, lambda text: text == "null"),
        ],
    )
    def test_rendering_keeps_literal_category(self, obj: object, category_check: object) -> None:
        """Rendered literals read back as the same kind of literal."""
        assert category_check(render_value(value_from_document(obj)))  # type: ignore[operator]
