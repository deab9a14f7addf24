"""Tests for the scalar rule factories."""

from __future__ import annotations

import re
from typing import Any

import pytest

from rulekit.config.models import MessageCatalog
from rulekit.config.settings import RuleKitSettings, configure
from rulekit.errors import RuleConfigError
from rulekit.rules import format, inclusion, length, numericality, presence, type_of
from rulekit.types import VALID, is_valid
from rulekit.values import ABSENT, TypeName


class TestPresence:
    @pytest.mark.parametrize("value", [ABSENT, None, "", " ", "\t", [], {}])
    def test_blank_fails(self, value: Any) -> None:
        assert presence()(value) == "can't be blank"

    @pytest.mark.parametrize("value", ["foo", 123, 0, True, False, [None], {"key": "value"}])
    def test_present_passes(self, value: Any) -> None:
        assert presence()(value) is True

    def test_called_without_value(self) -> None:
        assert presence()() == "can't be blank"

    def test_custom_message(self) -> None:
        assert presence("is required")(None) == "is required"

    def test_empty_custom_message_is_still_a_failure(self) -> None:
        result = presence("")(None)
        assert result == ""
        assert not is_valid(result)


class TestNumericality:
    @pytest.mark.parametrize(
        "value", [ABSENT, None, 0, 123, -123, 1.23, -1.23, "", "foo", True, False]
    )
    def test_no_bounds(self, value: Any) -> None:
        assert numericality()(value) is True

    def test_minimum(self) -> None:
        rule = numericality(min=1)
        assert rule(-1) == "must be greater or equal 1"
        assert rule(0) == "must be greater or equal 1"
        assert rule(0.999) == "must be greater or equal 1"
        assert rule(1) is True
        assert rule(2) is True

    def test_maximum(self) -> None:
        rule = numericality(max=1)
        assert rule(-1) is True
        assert rule(0) is True
        assert rule(1) is True
        assert rule(1.001) == "must be less or equal 1"
        assert rule(2) == "must be less or equal 1"

    @pytest.mark.parametrize("value", [ABSENT, None, "0", "-5", True, False, [], {}])
    def test_non_numbers_ignore_bounds(self, value: Any) -> None:
        assert numericality(min=1, max=2)(value) is True

    def test_min_checked_before_max(self) -> None:
        rule = numericality(min=5, max=1)
        assert rule(3) == "must be greater or equal 5"

    def test_float_bounds_render_like_numbers(self) -> None:
        assert numericality(min=3.0)(2) == "must be greater or equal 3"
        assert numericality(max=1.5)(2) == "must be less or equal 1.5"

    def test_non_numeric_bound_rejected(self) -> None:
        with pytest.raises(RuleConfigError):
            numericality(min="3")  # type: ignore[arg-type]

    def test_boolean_bound_rejected(self) -> None:
        with pytest.raises(RuleConfigError):
            numericality(max=True)


class TestLength:
    def test_min_and_max(self) -> None:
        rule = length(min=3, max=5)
        assert rule(ABSENT) is True
        assert rule(None) is True
        assert rule(0) is True
        assert rule("foo") is True
        assert rule("barz") is True
        assert rule("") == "is too short (minimum is 3 characters)"
        assert rule("no") == "is too short (minimum is 3 characters)"
        assert rule("foobar") == "is too long (maximum is 5 characters)"

    def test_exact(self) -> None:
        rule = length(is_=3)
        assert rule("foo") is True
        assert rule("foobar") == "is the wrong length (should be 3 characters)"
        assert rule("fo") == "is the wrong length (should be 3 characters)"

    def test_arrays(self) -> None:
        rule = length(min=1, max=2)
        assert rule([]) == "is too short (minimum is 1 characters)"
        assert rule([1, 2]) is True
        assert rule((1, 2, 3)) == "is too long (maximum is 2 characters)"

    def test_check_order(self) -> None:
        """min wins over is, max wins over is."""
        assert length(min=3, is_=4)("ab") == "is too short (minimum is 3 characters)"
        assert length(max=3, is_=2)("abcd") == "is too long (maximum is 3 characters)"
        assert length(min=1, max=5, is_=4)("abc") == (
            "is the wrong length (should be 4 characters)"
        )

    @pytest.mark.parametrize("value", [12345, True, {"a": 1, "b": 2}])
    def test_other_kinds_pass(self, value: Any) -> None:
        assert length(max=1)(value) is True

    def test_negative_bound_rejected(self) -> None:
        with pytest.raises(RuleConfigError):
            length(min=-1)

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(RuleConfigError):
            length(min=5, max=3)


class TestInclusion:
    def test_membership(self) -> None:
        rule = inclusion(["foo", "bar"])
        assert rule(ABSENT) is True
        assert rule(None) is True
        assert rule("foo") is True
        assert rule("bar") is True

    @pytest.mark.parametrize("value", ["baz", "", 123, 0, True, False])
    def test_non_members(self, value: Any) -> None:
        assert inclusion(["foo", "bar"])(value) == "must be one of: bar, foo"

    def test_message_lists_sorted_values(self) -> None:
        assert inclusion([3, 1, 2])(4) == "must be one of: 1, 2, 3"

    def test_caller_list_not_mutated(self) -> None:
        values = ["foo", "bar"]
        inclusion(values)
        assert values == ["foo", "bar"]

    def test_booleans_are_not_numbers(self) -> None:
        assert inclusion([0, 1])(True) == "must be one of: 0, 1"
        assert inclusion([True])(1) == "must be one of: true"
        assert inclusion([False, True])(False) is True

    def test_message_renders_booleans_and_null(self) -> None:
        assert inclusion([True, False])("x") == "must be one of: false, true"
        assert inclusion([None])("x") == "must be one of: "
        assert inclusion(["a", None])(1) == "must be one of: , a"

    def test_numbers_sort_numerically(self) -> None:
        assert inclusion([10, 9, 1])(2) == "must be one of: 1, 9, 10"

    def test_numeric_equality(self) -> None:
        assert inclusion([1, 2])(2.0) is True

    def test_mixed_kinds(self) -> None:
        rule = inclusion(["b", 1, "a"])
        assert rule("a") is True
        assert rule(1) is True
        assert rule("c") == "must be one of: 1, a, b"

    def test_custom_template(self) -> None:
        rule = inclusion(["x", "y"], "pick {{values}} please")
        assert rule("z") == "pick x, y please"


class TestFormat:
    DATE = r"^\d{4}-\d{2}-\d{2}$"

    def test_ignores_absent_and_non_strings(self) -> None:
        rule = format(self.DATE)
        for value in (ABSENT, None, 123, True, False, [], {}):
            assert rule(value) is True

    def test_matching_strings(self) -> None:
        assert format(self.DATE)("2020-02-20") is True

    @pytest.mark.parametrize("value", ["2020-02-20\n", "20-02-20", "foo", "x2020-02-20"])
    def test_non_matching_strings(self, value: str) -> None:
        assert format(self.DATE)(value) == "is invalid"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_strings_pass(self, value: str) -> None:
        assert format(self.DATE)(value) is True

    def test_full_match_without_anchors(self) -> None:
        rule = format(r"\d+")
        assert rule("123") is True
        assert rule("123abc") == "is invalid"

    def test_compiled_pattern_and_message(self) -> None:
        rule = format(re.compile(r"[a-z]+", re.IGNORECASE), "letters only")
        assert rule("AbC") is True
        assert rule("ab1") == "letters only"

    def test_invalid_pattern_rejected(self) -> None:
        with pytest.raises(RuleConfigError):
            format("([a-z]")

    @pytest.mark.parametrize("pattern", [rb"\d+", re.compile(rb"\d+")])
    def test_bytes_pattern_rejected(self, pattern: Any) -> None:
        with pytest.raises(RuleConfigError, match="must be text"):
            format(pattern)


class TestTypeOf:
    def test_string(self) -> None:
        rule = type_of("string")
        assert rule(ABSENT) is True
        assert rule(None) is True
        assert rule("") is True
        assert rule("foo") is True
        assert rule(123) == "is not a string"
        assert rule(True) == "is not a string"
        assert rule(False) == "is not a string"

    def test_integer(self) -> None:
        rule = type_of("integer")
        for value in (ABSENT, None, "", 0, 1, -1, 2.0):
            assert rule(value) is True
        for value in (1.2, "foo", True, False):
            assert rule(value) == "is not an integer"

    def test_number(self) -> None:
        rule = type_of("number")
        assert rule(1.5) is True
        assert rule(float("nan")) == "is not a number"
        assert rule("1") == "is not a number"

    def test_boolean(self) -> None:
        rule = type_of("boolean")
        for value in (ABSENT, None, "", True, False):
            assert rule(value) is True
        assert rule(1) == "is not a boolean"
        assert rule("foo") == "is not a boolean"

    def test_array(self) -> None:
        rule = type_of(TypeName.ARRAY)
        for value in (ABSENT, None, "", [], [1], ["foo", 3]):
            assert rule(value) is True
        for value in (1.2, "foo", True, False):
            assert rule(value) == "is not an array"

    def test_object(self) -> None:
        rule = type_of("object")
        for value in (ABSENT, None, "", {}, {"foo": 1}):
            assert rule(value) is True
        for value in (1.2, "foo", True, False, []):
            assert rule(value) == "is not an object"

    @pytest.mark.parametrize("type_name", [t.value for t in TypeName])
    def test_empty_string_always_passes(self, type_name: str) -> None:
        assert type_of(type_name)("") is True

    def test_custom_message(self) -> None:
        assert type_of("string", "must be text")(1) == "must be text"

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(RuleConfigError, match="Unknown type"):
            type_of("date")


class TestDeterminism:
    @pytest.mark.parametrize(
        "build",
        [
            lambda: presence(),
            lambda: numericality(min=0, max=10),
            lambda: length(min=2, max=4),
            lambda: inclusion(["b", "a"]),
            lambda: format(r"^[a-z]+$"),
            lambda: type_of("integer"),
        ],
    )
    def test_same_result_every_time(self, build: Any) -> None:
        first, second = build(), build()
        for value in (ABSENT, None, "", "abc", "Abc1", -1, 5, 11, 2.5, True, [1], {}):
            assert first(value) == first(value) == second(value)


class TestCatalogDefaults:
    def test_configured_messages_used_at_build_time(self) -> None:
        configure(
            RuleKitSettings(
                messages=MessageCatalog(
                    blank="is required",
                    greater_or_equal="must be at least {{min}}",
                    not_an="should be an {{type}}",
                )
            )
        )
        assert presence()(None) == "is required"
        assert numericality(min=2)(1) == "must be at least 2"
        assert type_of("integer")("x") == "should be an integer"

    def test_built_rules_keep_their_messages(self) -> None:
        rule = presence()
        configure(RuleKitSettings(messages=MessageCatalog(blank="is required")))
        assert rule(None) == "can't be blank"

    def test_valid_marker(self) -> None:
        assert VALID is True
        assert is_valid(presence()("x"))
