"""Market data domain models.

These models represent the already-validated market inputs handed to the
quoting core on each invocation. All models are immutable.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import field_validator
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class MarketSnapshot:
    """Mid price and volatility for one market at one point in time.

    The snapshot is produced by an external feed each invocation and is
    not retained afterwards.
    """

    market_id: str
    mid_price: Decimal
    volatility: Decimal
    timestamp: datetime | None = None

    @field_validator("mid_price")
    @classmethod
    def validate_mid_price(cls, v: Decimal) -> Decimal:
        """Ensure mid price is strictly positive."""
        if v <= 0:
            raise ValueError("Mid price must be positive")
        return v

    @field_validator("volatility")
    @classmethod
    def validate_volatility(cls, v: Decimal) -> Decimal:
        """Ensure volatility is not negative."""
        if v < 0:
            raise ValueError("Volatility must not be negative")
        return v

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: datetime | None) -> datetime | None:
        """Treat naive timestamps as UTC."""
        return as_utc(v) if v is not None else None

    def age_seconds(self, now: datetime) -> float | None:
        """Return how old the snapshot is at ``now``, or None if untimed.

        A naive ``now`` is taken to be UTC.
        """
        if self.timestamp is None:
            return None
        return (as_utc(now) - self.timestamp).total_seconds()


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class MarketSpec:
    """Static trading rules of a derivative market.

    Tick sizes are optional; when absent prices and quantities are
    passed through at full decimal precision.
    """

    market_id: str
    min_price_tick_size: Decimal | None = None
    min_quantity_tick_size: Decimal | None = None

    @field_validator("min_price_tick_size", "min_quantity_tick_size")
    @classmethod
    def validate_tick(cls, v: Decimal | None) -> Decimal | None:
        """Ensure tick sizes are positive when given."""
        if v is not None and v <= 0:
            raise ValueError("Tick size must be positive")
        return v
