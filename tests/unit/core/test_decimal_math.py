"""Tests for decimal arithmetic helpers."""

from decimal import Decimal

from deriv_maker.core.decimal_math import (
    absolute_difference,
    basis_points_to_fraction,
    clamp,
    round_down_to_tick,
    round_up_to_tick,
    safe_divide,
)


class TestAbsoluteDifference:
    """Tests for absolute_difference."""

    def test_larger_first(self) -> None:
        """Difference is positive when a > b."""
        assert absolute_difference(Decimal("10"), Decimal("3")) == Decimal("7")

    def test_smaller_first(self) -> None:
        """Difference is positive when a < b."""
        assert absolute_difference(Decimal("3"), Decimal("10")) == Decimal("7")

    def test_equal(self) -> None:
        """Equal values differ by zero."""
        assert absolute_difference(Decimal("4.5"), Decimal("4.5")) == Decimal("0")


class TestSafeDivide:
    """Tests for safe_divide."""

    def test_regular_division(self) -> None:
        """Non-zero denominator divides normally."""
        assert safe_divide(Decimal("1"), Decimal("4")) == Decimal("0.25")

    def test_zero_denominator_returns_zero(self) -> None:
        """Zero denominator yields zero instead of raising."""
        assert safe_divide(Decimal("5"), Decimal("0")) == Decimal("0")

    def test_zero_numerator(self) -> None:
        """Zero numerator yields zero."""
        assert safe_divide(Decimal("0"), Decimal("3")) == Decimal("0")


class TestBasisPoints:
    """Tests for basis_points_to_fraction."""

    def test_one_percent(self) -> None:
        """100 bp is 1%."""
        assert basis_points_to_fraction(Decimal("100")) == Decimal("0.01")

    def test_fractional_bp(self) -> None:
        """Half a basis point converts exactly."""
        assert basis_points_to_fraction(Decimal("0.5")) == Decimal("0.00005")

    def test_full_unit(self) -> None:
        """10,000 bp is 1."""
        assert basis_points_to_fraction(Decimal("10000")) == Decimal("1")


class TestTickRounding:
    """Tests for tick rounding helpers."""

    def test_round_down(self) -> None:
        """Values floor to the tick below."""
        assert round_down_to_tick(Decimal("3999.37"), Decimal("0.5")) == Decimal("3999.0")

    def test_round_up(self) -> None:
        """Values ceil to the tick above."""
        assert round_up_to_tick(Decimal("4000.01"), Decimal("0.5")) == Decimal("4000.5")

    def test_exact_multiple_unchanged(self) -> None:
        """Values already on a tick are left alone both ways."""
        assert round_down_to_tick(Decimal("4000.5"), Decimal("0.5")) == Decimal("4000.5")
        assert round_up_to_tick(Decimal("4000.5"), Decimal("0.5")) == Decimal("4000.5")

    def test_no_tick_is_noop(self) -> None:
        """Without a tick the value passes through."""
        assert round_down_to_tick(Decimal("1.2345"), None) == Decimal("1.2345")
        assert round_up_to_tick(Decimal("1.2345"), None) == Decimal("1.2345")


class TestClamp:
    """Tests for clamp."""

    def test_within_bounds(self) -> None:
        """Values inside the range are unchanged."""
        assert clamp(Decimal("0.5"), Decimal("0"), Decimal("1")) == Decimal("0.5")

    def test_above_upper(self) -> None:
        """Values above the range are capped."""
        assert clamp(Decimal("1.7"), Decimal("0"), Decimal("1")) == Decimal("1")

    def test_below_lower(self) -> None:
        """Values below the range are raised."""
        assert clamp(Decimal("-0.1"), Decimal("0"), Decimal("1")) == Decimal("0")
