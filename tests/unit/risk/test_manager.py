"""Tests for capital allocation and tail spread limits."""

from decimal import Decimal

from deriv_maker.risk.manager import capital_for_new_orders, enforce_minimum_tail_spread


class TestCapitalForNewOrders:
    """Tests for capital_for_new_orders."""

    def test_no_position(self) -> None:
        """Without margin the full active share is allocable."""
        assert capital_for_new_orders(
            Decimal("100000"), Decimal("0"), Decimal("0.2")
        ) == Decimal("20000")

    def test_subtracts_existing_margin(self) -> None:
        """Margin already in the position is taken off the budget."""
        assert capital_for_new_orders(
            Decimal("100000"), Decimal("10000"), Decimal("0.2")
        ) == Decimal("10000")

    def test_clamped_at_zero(self) -> None:
        """A position larger than the budget leaves nothing, never a negative."""
        assert capital_for_new_orders(
            Decimal("100000"), Decimal("30000"), Decimal("0.2")
        ) == Decimal("0")

    def test_zero_active_capital(self) -> None:
        """Zero active capital allocates nothing."""
        assert capital_for_new_orders(
            Decimal("100000"), Decimal("0"), Decimal("0")
        ) == Decimal("0")


class TestEnforceMinimumTailSpread:
    """Tests for enforce_minimum_tail_spread."""

    def test_wide_tails_unchanged(self) -> None:
        """Tails already beyond the minimum distance are kept."""
        buy_tail, sell_tail = enforce_minimum_tail_spread(
            Decimal("3999"),
            Decimal("4001"),
            Decimal("3800"),
            Decimal("4200"),
            Decimal("0.01"),
        )
        assert buy_tail == Decimal("3800")
        assert sell_tail == Decimal("4200")

    def test_close_tails_pushed_out(self) -> None:
        """Tails inside the minimum distance move to exactly that distance."""
        buy_tail, sell_tail = enforce_minimum_tail_spread(
            Decimal("3999"),
            Decimal("4001"),
            Decimal("3995"),
            Decimal("4005"),
            Decimal("0.01"),
        )
        assert buy_tail == Decimal("3999") * Decimal("0.99")
        assert sell_tail == Decimal("4001") * Decimal("1.01")
        assert buy_tail == Decimal("3959.01")
        assert sell_tail == Decimal("4041.01")

    def test_tail_on_wrong_side_of_head(self) -> None:
        """A buy tail above its head is pushed below it."""
        buy_tail, _ = enforce_minimum_tail_spread(
            Decimal("4000"),
            Decimal("4002"),
            Decimal("4010"),
            Decimal("4300"),
            Decimal("0.01"),
        )
        assert buy_tail == Decimal("3960.00")

    def test_exact_minimum_kept(self) -> None:
        """A tail exactly at the minimum distance is not moved."""
        buy_tail, sell_tail = enforce_minimum_tail_spread(
            Decimal("100"),
            Decimal("100"),
            Decimal("99"),
            Decimal("101"),
            Decimal("0.01"),
        )
        assert buy_tail == Decimal("99")
        assert sell_tail == Decimal("101")

    def test_zero_minimum(self) -> None:
        """A zero minimum never moves a tail at or beyond its head."""
        buy_tail, sell_tail = enforce_minimum_tail_spread(
            Decimal("100"),
            Decimal("100"),
            Decimal("100"),
            Decimal("100"),
            Decimal("0"),
        )
        assert buy_tail == Decimal("100")
        assert sell_tail == Decimal("100")
