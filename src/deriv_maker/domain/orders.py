"""Order domain models.

These models represent resting orders, quote ladders and the action plan
the quoting core hands back to its caller. All models are immutable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field
from pydantic.dataclasses import dataclass

from deriv_maker.domain.types import OrderSide, Price, Quantity


@dataclass(frozen=True)
class RestingOrder:
    """An order placed by a previous invocation that is still on the book.

    subaccount_id, fee_recipient and order_hash are carried through
    untouched; the core only reads side and price.
    """

    order_side: OrderSide
    price: Price
    quantity: Quantity
    margin: Decimal = Decimal("0")
    subaccount_id: str = ""
    fee_recipient: str = ""
    order_hash: str = ""


@dataclass(frozen=True)
class QuoteLevel:
    """One price/quantity step of a ladder."""

    price: Price
    quantity: Quantity
    margin: Decimal = Decimal("0")
    reduce_only: bool = False

    def notional(self) -> Decimal:
        """Return notional value (price * quantity)."""
        return self.price.value * self.quantity.value


@dataclass(frozen=True)
class QuoteLadder:
    """Price levels for one side of the book, ordered head to tail.

    Ladders are never mutated; a new one is built each invocation.
    """

    order_side: OrderSide
    levels: tuple[QuoteLevel, ...] = ()

    def is_empty(self) -> bool:
        """Return True if the ladder has no levels."""
        return len(self.levels) == 0

    def head(self) -> QuoteLevel | None:
        """Return the level closest to the reservation price."""
        return self.levels[0] if self.levels else None

    def tail(self) -> QuoteLevel | None:
        """Return the level farthest from the reservation price."""
        return self.levels[-1] if self.levels else None

    def total_quantity(self) -> Decimal:
        """Return the summed quantity of all levels."""
        return sum((level.quantity.value for level in self.levels), Decimal("0"))

    def total_margin(self) -> Decimal:
        """Return the summed margin committed by all levels."""
        return sum((level.margin for level in self.levels), Decimal("0"))


@dataclass(frozen=True)
class OrderRequest:
    """Request to place a new derivative limit order."""

    market_id: str
    order_side: OrderSide
    price: Price
    quantity: Quantity
    margin: Decimal
    reduce_only: bool = False
    subaccount_id: str = ""
    fee_recipient: str = ""

    @classmethod
    def from_level(
        cls,
        level: QuoteLevel,
        order_side: OrderSide,
        market_id: str,
        subaccount_id: str = "",
        fee_recipient: str = "",
    ) -> OrderRequest:
        """Create a request for a ladder level.

        Args:
            level: Ladder level to place
            order_side: BUY or SELL
            market_id: Market to place order in
            subaccount_id: Subaccount placing the order
            fee_recipient: Address receiving maker fee rebates

        Returns:
            OrderRequest with all fields populated
        """
        return cls(
            market_id=market_id,
            order_side=order_side,
            price=level.price,
            quantity=level.quantity,
            margin=level.margin,
            reduce_only=level.reduce_only,
            subaccount_id=subaccount_id,
            fee_recipient=fee_recipient,
        )


@dataclass(frozen=True)
class ActionPlan:
    """Outcome of one quoting decision.

    Either empty (leave the book alone) or a single batch that cancels
    every resting order in the listed markets and then creates the new
    ladders for both sides.
    """

    market_id: str = ""
    subaccount_id: str = ""
    cancel_all_market_ids: list[str] = Field(default_factory=list)
    orders_to_create: list[OrderRequest] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> ActionPlan:
        """Return the no-op plan."""
        return cls()

    @classmethod
    def replace_all(
        cls,
        market_id: str,
        subaccount_id: str,
        buy_ladder: QuoteLadder,
        sell_ladder: QuoteLadder,
        fee_recipient: str = "",
    ) -> ActionPlan:
        """Build a cancel-all-and-replace batch from both ladders.

        Buy levels come first, then sell levels, each head to tail.
        """
        orders = [
            OrderRequest.from_level(
                level,
                ladder.order_side,
                market_id,
                subaccount_id=subaccount_id,
                fee_recipient=fee_recipient,
            )
            for ladder in (buy_ladder, sell_ladder)
            for level in ladder.levels
        ]
        return cls(
            market_id=market_id,
            subaccount_id=subaccount_id,
            cancel_all_market_ids=[market_id],
            orders_to_create=orders,
        )

    def is_empty(self) -> bool:
        """Return True if nothing should be cancelled or created."""
        return not self.cancel_all_market_ids and not self.orders_to_create

    def buy_orders(self) -> list[OrderRequest]:
        """Return the bid-side orders to create."""
        return [o for o in self.orders_to_create if o.order_side == OrderSide.BUY]

    def sell_orders(self) -> list[OrderRequest]:
        """Return the ask-side orders to create."""
        return [o for o in self.orders_to_create if o.order_side == OrderSide.SELL]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation with decimal strings."""
        return {
            "market_id": self.market_id,
            "subaccount_id": self.subaccount_id,
            "cancel_all_market_ids": list(self.cancel_all_market_ids),
            "orders_to_create": [
                {
                    "order_side": o.order_side.value,
                    "price": str(o.price.value),
                    "quantity": str(o.quantity.value),
                    "margin": str(o.margin),
                    "reduce_only": o.reduce_only,
                    "fee_recipient": o.fee_recipient,
                }
                for o in self.orders_to_create
            ],
        }
