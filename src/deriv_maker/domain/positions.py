"""Position and account balance domain models.

All models are immutable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from deriv_maker.domain.types import OrderSide


@dataclass(frozen=True)
class Position:
    """Open derivative position in a single market.

    A position is either long or short; the quantity itself is always
    non-negative. Margin is the collateral already committed to it.
    """

    market_id: str
    is_long: bool
    quantity: Decimal
    entry_price: Decimal
    margin: Decimal

    @field_validator("quantity", "entry_price", "margin")
    @classmethod
    def validate_non_negative(cls, v: Decimal) -> Decimal:
        """Ensure amounts are not negative."""
        if v < 0:
            raise ValueError("Position amounts must not be negative")
        return v

    def notional(self) -> Decimal:
        """Return notional value at entry (quantity * entry_price)."""
        return self.quantity * self.entry_price

    def is_flat(self) -> bool:
        """Return True if no contracts are held."""
        return self.quantity == 0

    def increasing_side(self) -> OrderSide:
        """Return the order side that adds to this position."""
        return OrderSide.BUY if self.is_long else OrderSide.SELL

    @classmethod
    def flat(cls, market_id: str) -> Position:
        """Create a flat position for a market."""
        return cls(
            market_id=market_id,
            is_long=True,
            quantity=Decimal("0"),
            entry_price=Decimal("0"),
            margin=Decimal("0"),
        )


@dataclass(frozen=True)
class Deposit:
    """Subaccount deposit for the quote denomination.

    total_balance is the account value used as the inventory denominator;
    available_balance excludes funds locked in resting orders.
    """

    total_balance: Decimal
    available_balance: Decimal

    @field_validator("total_balance", "available_balance")
    @classmethod
    def validate_non_negative(cls, v: Decimal) -> Decimal:
        """Ensure balances are not negative."""
        if v < 0:
            raise ValueError("Balance must not be negative")
        return v
