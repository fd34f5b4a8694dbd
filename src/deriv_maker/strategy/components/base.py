"""Abstract base classes for strategy components.

These define the interfaces for the pluggable components that
compose the quoting engine's ladder generation pipeline.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from deriv_maker.domain.orders import QuoteLadder
from deriv_maker.domain.types import OrderSide


class ReservationPriceCalculator(ABC):
    """Calculates the inventory-adjusted center price (reservation price).

    Both ladders are built around the reservation price instead of the raw
    mid price, so inventory risk is priced in before anything else.
    """

    @abstractmethod
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
            imbalance: Normalized inventory imbalance in [0, 1]
            volatility: Current volatility estimate
            is_long: Direction of the inventory

        Returns:
            The reservation price adjusted for inventory
        """


class HeadPriceCalculator(ABC):
    """Calculates the best (head) buy and sell prices."""

    @abstractmethod
    def calculate(
        self,
        volatility: Decimal,
        reservation_price: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Calculate the head prices.

        Args:
            volatility: Current volatility estimate
            reservation_price: Inventory-adjusted center price

        Returns:
            Tuple of (buy_head, sell_head)
        """


class TailPriceCalculator(ABC):
    """Calculates the worst (tail) buy and sell prices."""

    @abstractmethod
    def calculate(
        self,
        buy_head: Decimal,
        sell_head: Decimal,
        mid_price: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Calculate the tail prices.

        Args:
            buy_head: New buy head
            sell_head: New sell head
            mid_price: Current market mid price

        Returns:
            Tuple of (buy_tail, sell_tail)
        """


class LadderBuilder(ABC):
    """Turns a head, a tail and a capital budget into price levels."""

    @abstractmethod
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
            opposing_position_quantity: Quantity of an opposing position
                to flatten (zero when the ladder grows exposure)
            order_side: BUY or SELL

        Returns:
            Ladder ordered head to tail, possibly empty
        """
