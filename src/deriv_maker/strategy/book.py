"""Resting order book splitting.

Orders placed by the previous invocation come back unordered; these
helpers put each side's head at index 0.
"""

from __future__ import annotations

from collections.abc import Iterable

from deriv_maker.domain.orders import RestingOrder
from deriv_maker.domain.types import OrderSide


def split_resting_orders(
    resting_orders: Iterable[RestingOrder],
) -> tuple[list[RestingOrder], list[RestingOrder]]:
    """Partition resting orders by side with the head first.

    Bids are sorted descending by price (best bid first).
    Asks are sorted ascending by price (best ask first).
    Orders at equal prices keep their input order.

    Args:
        resting_orders: Orders from both sides of the book

    Returns:
        Tuple of (buy_orders, sell_orders)
    """
    buys: list[RestingOrder] = []
    sells: list[RestingOrder] = []
    for order in resting_orders:
        if order.order_side == OrderSide.BUY:
            buys.append(order)
        else:
            sells.append(order)

    buys = sorted(buys, key=lambda o: o.price.value, reverse=True)
    sells = sorted(sells, key=lambda o: o.price.value)
    return buys, sells
