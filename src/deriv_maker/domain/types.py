"""Core value objects for the quoting core.

These types form the foundation of the domain model and are used throughout
the system. All types are immutable so a single decision never mutates the
inputs it was handed.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import field_validator
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Price:
    """A strictly positive price in quote currency.

    Derivative prices are unbounded above, unlike binary contracts, so the
    only constraint is positivity.
    """

    value: Decimal

    @field_validator("value")
    @classmethod
    def validate_positive(cls, v: Decimal) -> Decimal:
        """Ensure price is strictly positive."""
        if v <= 0:
            raise ValueError("Price must be positive")
        return v

    def __repr__(self) -> str:
        return f"Price({self.value})"


@dataclass(frozen=True)
class Quantity:
    """A non-negative amount of contracts.

    Fractional quantities are allowed; venues enforce their own
    quantity tick which is applied separately.
    """

    value: Decimal

    @field_validator("value")
    @classmethod
    def validate_non_negative(cls, v: Decimal) -> Decimal:
        """Ensure quantity is not negative."""
        if v < 0:
            raise ValueError("Quantity must not be negative")
        return v

    def __repr__(self) -> str:
        return f"Quantity({self.value})"


class OrderSide(str, Enum):
    """Order direction: BUY or SELL."""

    BUY = "buy"
    SELL = "sell"

    def opposite(self) -> OrderSide:
        """Return the opposite order side."""
        return OrderSide.SELL if self == OrderSide.BUY else OrderSide.BUY

    @property
    def is_buy(self) -> bool:
        """Return True for the bid side."""
        return self == OrderSide.BUY
