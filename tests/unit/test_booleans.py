"""Tests for coercion.booleans."""

from __future__ import annotations

import pytest

from coercion.booleans import parse_bool, to_bool, try_bool


class TestToBool:
    """Tests for to_bool."""

    @pytest.mark.parametrize("value", ["", "0", "false", "FALSE", "No", "off", " off ", b"no"])
    def test_false_words(self, value) -> None:
        assert to_bool(value) is False

    @pytest.mark.parametrize("value", ["1", "true", "yes", "banana", "nope"])
    def test_other_strings_are_true(self, value) -> None:
        assert to_bool(value) is True

    def test_none_is_false(self) -> None:
        assert to_bool(None) is False

    def test_bools_pass_through(self) -> None:
        assert to_bool(True) is True
        assert to_bool(False) is False

    def test_native_truthiness(self) -> None:
        assert to_bool(0) is False
        assert to_bool(3) is True
        assert to_bool([]) is False
        assert to_bool([0]) is True


class TestTryBool:
    """Tests for try_bool."""

    def test_missing_values_are_none(self) -> None:
        assert try_bool(None) is None
        assert try_bool("") is None
        assert try_bool("   ") is None

    def test_otherwise_matches_to_bool(self) -> None:
        for value in ("off", "banana", 0, 1, True, [1]):
            assert try_bool(value) is to_bool(value)


class TestParseBool:
    """Tests for parse_bool."""

    @pytest.mark.parametrize("value", ["1", "true", "Yes", "ON", 1, 2.5, True])
    def test_truthy(self, value) -> None:
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "Off", 0, 0.0, False])
    def test_falsy(self, value) -> None:
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["banana", "", "2", None, [], object()])
    def test_unknown(self, value) -> None:
        assert parse_bool(value) is None

    def test_strict_and_permissive_differ(self) -> None:
        assert parse_bool("banana") is None
        assert to_bool("banana") is True
