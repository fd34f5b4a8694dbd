"""Risk management module.

Provides capital allocation for new ladders and the minimum
head-to-tail spread limit.
"""

from deriv_maker.risk.manager import capital_for_new_orders, enforce_minimum_tail_spread

__all__ = [
    "capital_for_new_orders",
    "enforce_minimum_tail_spread",
]
