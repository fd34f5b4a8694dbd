"""Capital allocation and tail-spread limits.

These helpers decide how much capital a new ladder may commit and
keep every ladder at least a minimum distance deep.
"""

from __future__ import annotations

from decimal import Decimal

from deriv_maker.core.decimal_math import safe_divide


def capital_for_new_orders(
    total_account_value: Decimal,
    existing_position_margin: Decimal,
    active_capital_fraction: Decimal,
) -> Decimal:
    """Return the value a new ladder may allocate.

    Margin already committed to a position is subtracted when the new
    orders would grow that position. Callers building the reducing side
    pass zero margin. The result is never negative.

    Args:
        total_account_value: Total notional value of the account
        existing_position_margin: Margin already tied up in the position
        active_capital_fraction: Share of account value to keep on the book

    Returns:
        Allocable value, clamped at zero
    """
    allocable = total_account_value * active_capital_fraction - existing_position_margin
    return max(allocable, Decimal("0"))


def enforce_minimum_tail_spread(
    buy_head: Decimal,
    sell_head: Decimal,
    proposed_buy_tail: Decimal,
    proposed_sell_tail: Decimal,
    min_tail_distance: Decimal,
) -> tuple[Decimal, Decimal]:
    """Push tails out so each ladder spans at least min_tail_distance.

    A buy tail closer than ``buy_head * (1 - min_tail_distance)`` is
    replaced by that price; a sell tail closer than
    ``sell_head * (1 + min_tail_distance)`` likewise.

    Returns:
        Tuple of (buy_tail, sell_tail)
    """
    buy_tail = proposed_buy_tail
    if safe_divide(buy_head - proposed_buy_tail, buy_head) < min_tail_distance:
        buy_tail = buy_head * (Decimal("1") - min_tail_distance)

    sell_tail = proposed_sell_tail
    if safe_divide(proposed_sell_tail - sell_head, sell_head) < min_tail_distance:
        sell_tail = sell_head * (Decimal("1") + min_tail_distance)

    return buy_tail, sell_tail
