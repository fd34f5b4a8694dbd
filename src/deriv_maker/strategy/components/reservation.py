"""Reservation price calculator implementations.

Provides implementations of the ReservationPriceCalculator interface.
"""

from decimal import Decimal

from deriv_maker.strategy.components.base import ReservationPriceCalculator


class InventoryReservation(ReservationPriceCalculator):
    """Shifts the mid price against the current inventory.

    Formula:
        r = s - i * σ * ρ   (long inventory)
        r = s + i * σ * ρ   (short inventory)

    Where:
        - r is the reservation price
        - s is the mid price
        - i is the inventory imbalance in [0, 1]
        - σ is the volatility
        - ρ is the reservation sensitivity parameter

    A long book quotes lower to attract sells and slow further buys; a
    short book quotes higher. The shift grows monotonically with both
    imbalance and volatility.
    """

    def __init__(self, reservation_param: Decimal) -> None:
        """Initialize with sensitivity parameter.

        Args:
            reservation_param: Sensitivity of the shift, in [0, 1]
        """
        self._reservation_param = reservation_param

    @property
    def reservation_param(self) -> Decimal:
        """Return the sensitivity parameter."""
        return self._reservation_param

    def calculate(
        self,
        mid_price: Decimal,
        imbalance: Decimal,
        volatility: Decimal,
        is_long: bool,
    ) -> Decimal:
        """Calculate the reservation price.

        Args:
            mid_price: Current market mid price
            imbalance: Normalized inventory imbalance
            volatility: Current volatility estimate
            is_long: Direction of the inventory

        Returns:
            Reservation price, equal to mid_price when imbalance is zero
        """
        if imbalance == 0:
            return mid_price

        shift = imbalance * volatility * self._reservation_param
        if is_long:
            return mid_price - shift
        return mid_price + shift
