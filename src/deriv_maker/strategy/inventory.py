"""Inventory imbalance measurement.

Expresses how much of the account is tied up in a directional position,
as a fraction of total account value.
"""

from __future__ import annotations

from decimal import Decimal

from deriv_maker.core.decimal_math import clamp, safe_divide
from deriv_maker.domain.positions import Position


def inventory_imbalance(
    position: Position | None,
    total_account_value: Decimal,
) -> tuple[Decimal, bool]:
    """Calculate the normalized inventory imbalance.

    Formula:
        imbalance = clamp(quantity * entry_price / total_account_value, 0, 1)

    A flat or absent position yields zero; the direction flag is then
    meaningless and reported as long. A zero account value also yields
    zero rather than failing.

    Args:
        position: Current position, or None when flat
        total_account_value: Total notional value of the account

    Returns:
        Tuple of (imbalance in [0, 1], is_long)
    """
    if position is None or position.is_flat():
        return Decimal("0"), True

    imbalance = safe_divide(position.notional(), total_account_value)
    return clamp(imbalance, Decimal("0"), Decimal("1")), position.is_long
