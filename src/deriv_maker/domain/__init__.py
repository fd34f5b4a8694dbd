"""Domain models for the quoting core.

This package contains all domain models that are venue-agnostic.
All models are immutable and use Decimal for prices.
"""

from deriv_maker.domain.errors import (
    ConfigurationError,
    PricingError,
    StaleDataError,
    TradingError,
)
from deriv_maker.domain.market_data import MarketSnapshot, MarketSpec
from deriv_maker.domain.orders import (
    ActionPlan,
    OrderRequest,
    QuoteLadder,
    QuoteLevel,
    RestingOrder,
)
from deriv_maker.domain.positions import Deposit, Position
from deriv_maker.domain.types import OrderSide, Price, Quantity

__all__ = [
    # Types
    "OrderSide",
    "Price",
    "Quantity",
    # Market Data
    "MarketSnapshot",
    "MarketSpec",
    # Orders
    "ActionPlan",
    "OrderRequest",
    "QuoteLadder",
    "QuoteLevel",
    "RestingOrder",
    # Positions
    "Deposit",
    "Position",
    # Errors
    "ConfigurationError",
    "PricingError",
    "StaleDataError",
    "TradingError",
]
