"""Hysteresis gate for quote replacement.

Decides whether newly computed heads differ enough from the resting
heads to justify cancelling and replacing the book.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from deriv_maker.core.decimal_math import absolute_difference, safe_divide
from deriv_maker.domain.orders import RestingOrder


def should_replace(
    existing_side_orders: Sequence[RestingOrder],
    new_head: Decimal,
    head_change_tolerance: Decimal,
) -> bool:
    """Return True if one side of the book should be requoted.

    An empty side always requotes. Otherwise the resting head (index 0,
    see split_resting_orders) is compared against the new head:

        |old_head - new_head| / old_head > tolerance

    A change exactly at the tolerance does not requote.

    Args:
        existing_side_orders: One side's resting orders, head first
        new_head: Newly computed head for the same side
        head_change_tolerance: Relative change threshold

    Returns:
        True if the change is large enough (or nothing is resting)
    """
    if not existing_side_orders:
        return True

    old_head = existing_side_orders[0].price.value
    return relative_head_change(old_head, new_head) > head_change_tolerance


def relative_head_change(old_head: Decimal, new_head: Decimal) -> Decimal:
    """Return |old_head - new_head| / old_head (zero for a zero old head)."""
    return safe_divide(absolute_difference(old_head, new_head), old_head)


class HeadChangeGate:
    """Applies the configured head change tolerance to both sides.

    Churn is suppressed unless at least one side moves by more than the
    tolerance; the caller then replaces both sides together.
    """

    def __init__(self, head_change_tolerance: Decimal = Decimal("0")) -> None:
        """Initialize gate with tolerance.

        Args:
            head_change_tolerance: Relative head move that triggers a requote
        """
        self._tolerance = head_change_tolerance

    @property
    def tolerance(self) -> Decimal:
        """Return the head change tolerance."""
        return self._tolerance

    def should_replace(self, existing_side_orders: Sequence[RestingOrder], new_head: Decimal) -> bool:
        """Return True if this side trips the gate."""
        return should_replace(existing_side_orders, new_head, self._tolerance)

    def trips(
        self,
        open_buys: Sequence[RestingOrder],
        open_sells: Sequence[RestingOrder],
        new_buy_head: Decimal,
        new_sell_head: Decimal,
    ) -> tuple[bool, bool]:
        """Evaluate both sides independently.

        Returns:
            Tuple of (buy_side_trips, sell_side_trips)
        """
        return (
            self.should_replace(open_buys, new_buy_head),
            self.should_replace(open_sells, new_sell_head),
        )
