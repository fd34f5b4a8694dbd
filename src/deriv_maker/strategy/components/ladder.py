"""Ladder builder implementations.

Provides implementations of the LadderBuilder interface.
"""

from __future__ import annotations

from decimal import Decimal

from deriv_maker.core.decimal_math import (
    absolute_difference,
    round_down_to_tick,
    round_up_to_tick,
    safe_divide,
)
from deriv_maker.domain.market_data import MarketSpec
from deriv_maker.domain.orders import QuoteLadder, QuoteLevel
from deriv_maker.domain.types import OrderSide, Price, Quantity
from deriv_maker.strategy.components.base import LadderBuilder


class LinearLadder(LadderBuilder):
    """Evenly spaced ladder with equal size on every level.

    Levels run from head to tail inclusive:
        step = |head - tail| / (density - 1)
        price_i = head - i * step   (buy)
        price_i = head + i * step   (sell)

    Sizing depends on what the ladder is for:
    - Growing exposure: quantity = allocable / head / density * leverage,
      each level committing price * quantity / leverage of margin.
    - Flattening an opposing position: quantity = position / density,
      reduce-only with no margin. Leverage is not applied; the levels
      add up to exactly the position quantity.

    With venue tick sizes, buy prices are floored and sell prices ceiled
    (never quoting tighter than computed) and quantities are floored.
    Levels that round to zero quantity or a non-positive price are dropped.
    """

    def __init__(
        self,
        order_density: int,
        leverage: Decimal,
        market_spec: MarketSpec | None = None,
    ) -> None:
        """Initialize with ladder shape.

        Args:
            order_density: Number of levels per ladder (at least 1)
            leverage: Leverage applied to exposure-increasing levels
            market_spec: Optional venue tick sizes
        """
        self._order_density = order_density
        self._leverage = leverage
        self._market_spec = market_spec

    @property
    def order_density(self) -> int:
        """Return the number of levels per ladder."""
        return self._order_density

    @property
    def leverage(self) -> Decimal:
        """Return the configured leverage."""
        return self._leverage

    def build(
        self,
        head: Decimal,
        tail: Decimal,
        allocable_value: Decimal,
        opposing_position_quantity: Decimal,
        order_side: OrderSide,
    ) -> QuoteLadder:
        """Build the ladder for one side.

        Args:
            head: Price closest to the reservation price
            tail: Price farthest from the reservation price
            allocable_value: Capital the ladder may commit
            opposing_position_quantity: Opposing position to flatten
            order_side: BUY or SELL

        Returns:
            Ladder ordered head to tail; empty when there is nothing to size
        """
        density = Decimal(self._order_density)
        reduce_only = opposing_position_quantity > 0

        if reduce_only:
            quantity = opposing_position_quantity / density
        else:
            quantity = safe_divide(allocable_value, head) / density * self._leverage

        quantity = round_down_to_tick(quantity, self._quantity_tick())
        if quantity <= 0:
            return QuoteLadder(order_side=order_side)

        levels = []
        for price in self._level_prices(head, tail, order_side):
            if price <= 0:
                continue
            margin = Decimal("0") if reduce_only else price * quantity / self._leverage
            levels.append(
                QuoteLevel(
                    price=Price(price),
                    quantity=Quantity(quantity),
                    margin=margin,
                    reduce_only=reduce_only,
                )
            )

        return QuoteLadder(order_side=order_side, levels=tuple(levels))

    def _level_prices(self, head: Decimal, tail: Decimal, order_side: OrderSide) -> list[Decimal]:
        """Return tick-rounded level prices from head to tail."""
        if self._order_density == 1:
            raw = [head]
        else:
            step = absolute_difference(head, tail) / Decimal(self._order_density - 1)
            if order_side.is_buy:
                raw = [head - step * i for i in range(self._order_density - 1)]
            else:
                raw = [head + step * i for i in range(self._order_density - 1)]
            raw.append(tail)

        tick = self._price_tick()
        if order_side.is_buy:
            return [round_down_to_tick(p, tick) for p in raw]
        return [round_up_to_tick(p, tick) for p in raw]

    def _price_tick(self) -> Decimal | None:
        return self._market_spec.min_price_tick_size if self._market_spec else None

    def _quantity_tick(self) -> Decimal | None:
        return self._market_spec.min_quantity_tick_size if self._market_spec else None
