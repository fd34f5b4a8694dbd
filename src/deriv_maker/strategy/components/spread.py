"""Head and tail price calculator implementations.

Provides implementations of the HeadPriceCalculator and
TailPriceCalculator interfaces.
"""

from decimal import Decimal

from deriv_maker.core.decimal_math import safe_divide
from deriv_maker.risk.manager import enforce_minimum_tail_spread
from deriv_maker.strategy.components.base import HeadPriceCalculator, TailPriceCalculator


class VolatilitySpreadHeads(HeadPriceCalculator):
    """Places both heads symmetrically around the reservation price.

    Formula:
        δ = σ * spread_param / 2
        buy_head = r - δ
        sell_head = r + δ

    With zero volatility or a zero spread parameter both heads collapse
    onto the reservation price.
    """

    def __init__(self, spread_param: Decimal) -> None:
        """Initialize with spread sensitivity.

        Args:
            spread_param: Sensitivity of the spread to volatility, in [0, 1]
        """
        self._spread_param = spread_param

    @property
    def spread_param(self) -> Decimal:
        """Return the spread parameter."""
        return self._spread_param

    def calculate(
        self,
        volatility: Decimal,
        reservation_price: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Calculate head prices.

        Args:
            volatility: Current volatility estimate
            reservation_price: Inventory-adjusted center price

        Returns:
            Tuple of (buy_head, sell_head)
        """
        half_spread = safe_divide(volatility * self._spread_param, Decimal("2"))
        return reservation_price - half_spread, reservation_price + half_spread


class MidAnchoredTails(TailPriceCalculator):
    """Anchors tails at a fixed distance from the mid price.

    Formula:
        buy_tail = s * (1 - tail_distance_from_mid)
        sell_tail = s * (1 + tail_distance_from_mid)

    Tails that end up closer to their head than min_tail_distance are
    pushed out by the risk manager.
    """

    def __init__(self, tail_distance_from_mid: Decimal, min_tail_distance: Decimal) -> None:
        """Initialize with tail distances.

        Args:
            tail_distance_from_mid: Distance of tails from mid, as a fraction
            min_tail_distance: Minimum head-to-tail distance, as a fraction
        """
        self._tail_distance_from_mid = tail_distance_from_mid
        self._min_tail_distance = min_tail_distance

    def calculate(
        self,
        buy_head: Decimal,
        sell_head: Decimal,
        mid_price: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Calculate tail prices.

        Returns:
            Tuple of (buy_tail, sell_tail)
        """
        proposed_buy_tail = mid_price * (Decimal("1") - self._tail_distance_from_mid)
        proposed_sell_tail = mid_price * (Decimal("1") + self._tail_distance_from_mid)
        return enforce_minimum_tail_spread(
            buy_head,
            sell_head,
            proposed_buy_tail,
            proposed_sell_tail,
            self._min_tail_distance,
        )
