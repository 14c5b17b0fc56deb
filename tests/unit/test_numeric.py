"""Tests for coercion.numeric."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, Flag, IntEnum
from fractions import Fraction

import pytest

from coercion.exceptions import InvalidArgumentError
from coercion.numeric import (
    as_float,
    as_int,
    clamp_degrees,
    clamp_float,
    clamp_int,
    is_numeric,
    to_float,
    to_int,
    try_float,
    try_int,
)


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class Weight(IntEnum):
    LIGHT = 5
    HEAVY = 50


class Size(str, Enum):
    SMALL = "s"
    LARGE = "12"


class Channel(Flag):
    RED = 1
    GREEN = 2


class Amount:
    def __init__(self, text: str) -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text


class TestIsNumeric:
    """Tests for is_numeric."""

    @pytest.mark.parametrize("value", [1, 2.5, Decimal("3"), "42", " -1.5 ", "1e3", ".5", "+7", b"8"])
    def test_numeric(self, value) -> None:
        assert is_numeric(value) is True

    @pytest.mark.parametrize("value", [True, None, "", "abc", "1_000", "0x10", "inf", "nan", "1.2.3", [1]])
    def test_not_numeric(self, value) -> None:
        assert is_numeric(value) is False


class TestTryInt:
    """Tests for try_int."""

    def test_documented_examples(self) -> None:
        assert as_int("42") == 42
        assert as_int("3.9") == 3
        assert as_int(True) == 1

    def test_truncates_toward_zero(self) -> None:
        assert try_int(-3.9) == -3
        assert try_int("-3.9") == -3
        assert try_int(Decimal("7.99")) == 7
        assert try_int(Fraction(7, 2)) == 3

    def test_exponent_and_large_strings(self) -> None:
        assert try_int("1e3") == 1000
        assert try_int("123456789012345678901234567890") == 123456789012345678901234567890

    def test_booleans(self) -> None:
        assert try_int(False) == 0

    def test_ordinal_enum_uses_index(self) -> None:
        assert try_int(Shape.TRIANGLE) == 2

    def test_backed_enum_uses_payload(self) -> None:
        assert try_int(Weight.HEAVY) == 50
        assert try_int(Size.LARGE) == 12

    def test_backed_enum_without_numeric_payload_uses_index(self) -> None:
        assert try_int(Size.SMALL) == 0

    def test_combined_flag_uses_bit_value(self) -> None:
        assert try_int(Channel.RED | Channel.GREEN) == 3
        assert try_int(Channel.GREEN) == 2

    def test_stringable_object_is_parsed(self) -> None:
        assert try_int(Amount("17")) == 17
        assert try_int(Amount("seventeen")) is None

    @pytest.mark.parametrize("value", [None, "abc", "", float("nan"), float("inf"), [1], object()])
    def test_unconvertible(self, value) -> None:
        assert try_int(value) is None

    def test_as_int_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="coerced to int"):
            as_int("abc")

    def test_to_int_defaults_to_zero(self) -> None:
        assert to_int("abc") == 0
        assert to_int(None) == 0
        assert to_int("12") == 12


class TestTryFloat:
    """Tests for try_float."""

    def test_conversions(self) -> None:
        assert try_float("3.25") == pytest.approx(3.25)
        assert try_float(4) == 4.0
        assert isinstance(try_float(4), float)
        assert try_float(True) == 1.0
        assert try_float(Decimal("0.5")) == pytest.approx(0.5)
        assert try_float(Amount("2.5")) == pytest.approx(2.5)

    def test_enums_are_not_supported(self) -> None:
        assert try_float(Shape.CIRCLE) is None
        assert try_float(Size.LARGE) is None

    def test_int_enum_is_a_number(self) -> None:
        assert try_float(Weight.LIGHT) == 5.0

    def test_huge_integer_overflows_to_none(self) -> None:
        assert try_float(10**400) is None

    def test_strict_and_default_tiers(self) -> None:
        with pytest.raises(InvalidArgumentError, match="coerced to float"):
            as_float("x")
        assert to_float("x") == 0.0
        assert as_float("1.5") == pytest.approx(1.5)


class TestClampInt:
    """Tests for clamp_int."""

    def test_none_passes_through(self) -> None:
        assert clamp_int(None, 0, 10) is None

    def test_within_bounds(self) -> None:
        assert clamp_int("5", min_value=0, max_value=10) == 5

    def test_clamps_to_bounds(self) -> None:
        assert clamp_int(-4, min_value=0) == 0
        assert clamp_int(99, max_value=10) == 10

    def test_inverted_bounds_min_wins(self) -> None:
        assert clamp_int(5, min_value=10, max_value=1) == 10

    def test_unconvertible_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            clamp_int("abc")


class TestClampFloat:
    """Tests for clamp_float."""

    def test_clamps(self) -> None:
        assert clamp_float("2.5", min_value=0.0, max_value=1.0) == 1.0
        assert clamp_float(-0.5, min_value=0.0) == 0.0
        assert clamp_float(None) is None


class TestClampDegrees:
    """Tests for clamp_degrees."""

    def test_documented_examples(self) -> None:
        assert clamp_degrees(-10) == pytest.approx(350.0)
        assert clamp_degrees(370) == pytest.approx(10.0)

    def test_values_just_below_full_turn_are_kept(self) -> None:
        # single modulo normalization: [359, 360) is not folded further
        assert clamp_degrees(359.5) == pytest.approx(359.5)

    def test_full_turn_wraps_to_zero(self) -> None:
        assert clamp_degrees(360) == 0.0
        assert clamp_degrees(720) == 0.0

    def test_tiny_negative_stays_below_full_turn(self) -> None:
        assert 0.0 <= clamp_degrees(-1e-20) < 360.0

    def test_clamps_after_normalization(self) -> None:
        assert clamp_degrees(-10, max_value=300) == pytest.approx(300.0)
        assert clamp_degrees(370, min_value=45) == pytest.approx(45.0)

    def test_none_passes_through(self) -> None:
        assert clamp_degrees(None) is None

    def test_non_finite_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="finite"):
            clamp_degrees(float("inf"))
