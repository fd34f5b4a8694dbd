"""Tests for order domain models."""

from decimal import Decimal

import pytest

from deriv_maker.domain.orders import (
    ActionPlan,
    OrderRequest,
    QuoteLadder,
    QuoteLevel,
    RestingOrder,
)
from deriv_maker.domain.types import OrderSide, Price, Quantity


def _level(price: str, quantity: str = "1", margin: str = "0", reduce_only: bool = False) -> QuoteLevel:
    return QuoteLevel(
        price=Price(Decimal(price)),
        quantity=Quantity(Decimal(quantity)),
        margin=Decimal(margin),
        reduce_only=reduce_only,
    )


class TestRestingOrder:
    """Tests for RestingOrder."""

    def test_pass_through_fields(self) -> None:
        """Identifying data is kept as given."""
        order = RestingOrder(
            order_side=OrderSide.BUY,
            price=Price(Decimal("3990")),
            quantity=Quantity(Decimal("1")),
            subaccount_id="0xsub",
            fee_recipient="inj1fee",
            order_hash="0xhash",
        )
        assert order.subaccount_id == "0xsub"
        assert order.fee_recipient == "inj1fee"
        assert order.order_hash == "0xhash"
        assert order.margin == Decimal("0")


class TestQuoteLevel:
    """Tests for QuoteLevel."""

    def test_notional(self) -> None:
        """Notional is price times quantity."""
        assert _level("4000", "0.5").notional() == Decimal("2000.0")


class TestQuoteLadder:
    """Tests for QuoteLadder."""

    def test_empty(self) -> None:
        """A ladder without levels is empty with no head or tail."""
        ladder = QuoteLadder(order_side=OrderSide.BUY)
        assert ladder.is_empty()
        assert ladder.head() is None
        assert ladder.tail() is None
        assert ladder.total_quantity() == Decimal("0")

    def test_head_and_tail(self) -> None:
        """Head is the first level, tail the last."""
        ladder = QuoteLadder(
            order_side=OrderSide.SELL,
            levels=(_level("4001"), _level("4100"), _level("4200")),
        )
        assert ladder.head().price.value == Decimal("4001")
        assert ladder.tail().price.value == Decimal("4200")

    def test_totals(self) -> None:
        """Totals sum quantity and margin over levels."""
        ladder = QuoteLadder(
            order_side=OrderSide.BUY,
            levels=(_level("100", "2", "50"), _level("90", "3", "60")),
        )
        assert ladder.total_quantity() == Decimal("5")
        assert ladder.total_margin() == Decimal("110")


class TestOrderRequest:
    """Tests for OrderRequest."""

    def test_from_level(self) -> None:
        """A request copies price, size, margin and reduce-only from the level."""
        level = _level("3999", "0.25", "500", reduce_only=True)
        request = OrderRequest.from_level(
            level, OrderSide.SELL, "0xmarket", subaccount_id="0xsub", fee_recipient="inj1fee"
        )
        assert request.market_id == "0xmarket"
        assert request.order_side == OrderSide.SELL
        assert request.price == level.price
        assert request.quantity == level.quantity
        assert request.margin == Decimal("500")
        assert request.reduce_only
        assert request.subaccount_id == "0xsub"
        assert request.fee_recipient == "inj1fee"


class TestActionPlan:
    """Tests for ActionPlan."""

    @pytest.fixture
    def ladders(self) -> tuple[QuoteLadder, QuoteLadder]:
        """Two-level buy ladder and one-level sell ladder."""
        return (
            QuoteLadder(order_side=OrderSide.BUY, levels=(_level("3999"), _level("3900"))),
            QuoteLadder(order_side=OrderSide.SELL, levels=(_level("4001"),)),
        )

    def test_empty_plan(self) -> None:
        """The no-op plan cancels and creates nothing."""
        plan = ActionPlan.empty()
        assert plan.is_empty()
        assert plan.cancel_all_market_ids == []
        assert plan.orders_to_create == []

    def test_replace_all(self, ladders: tuple[QuoteLadder, QuoteLadder]) -> None:
        """Replace-all cancels the market and creates every level, bids first."""
        buy, sell = ladders
        plan = ActionPlan.replace_all("0xmarket", "0xsub", buy, sell, fee_recipient="inj1fee")

        assert not plan.is_empty()
        assert plan.cancel_all_market_ids == ["0xmarket"]
        assert [o.order_side for o in plan.orders_to_create] == [
            OrderSide.BUY,
            OrderSide.BUY,
            OrderSide.SELL,
        ]
        assert [o.price.value for o in plan.buy_orders()] == [Decimal("3999"), Decimal("3900")]
        assert [o.price.value for o in plan.sell_orders()] == [Decimal("4001")]
        assert all(o.subaccount_id == "0xsub" for o in plan.orders_to_create)

    def test_replace_all_with_empty_ladders_still_cancels(self) -> None:
        """A refresh with nothing to place still cancels the stale book."""
        plan = ActionPlan.replace_all(
            "0xmarket",
            "0xsub",
            QuoteLadder(order_side=OrderSide.BUY),
            QuoteLadder(order_side=OrderSide.SELL),
        )
        assert not plan.is_empty()
        assert plan.orders_to_create == []

    def test_to_dict(self, ladders: tuple[QuoteLadder, QuoteLadder]) -> None:
        """to_dict renders decimals as strings."""
        buy, sell = ladders
        data = ActionPlan.replace_all("0xmarket", "0xsub", buy, sell).to_dict()
        assert data["cancel_all_market_ids"] == ["0xmarket"]
        assert data["orders_to_create"][0] == {
            "order_side": "buy",
            "price": "3999",
            "quantity": "1",
            "margin": "0",
            "reduce_only": False,
            "fee_recipient": "",
        }
