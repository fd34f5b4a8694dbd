"""Strategy module for quote ladder generation.

This package contains:
- QuotingEngine: Composes pluggable components into one quoting decision
- Component ABCs and implementations: reservation, heads, tails, ladder
- Inventory imbalance and resting order splitting helpers
- Factory functions for building engines from configuration
"""

from deriv_maker.strategy.engine import QuoteContext, QuoteDecision, QuotingEngine
from deriv_maker.strategy.factory import build_engine, create_quoting_engine

__all__ = [
    "QuoteContext",
    "QuoteDecision",
    "QuotingEngine",
    "build_engine",
    "create_quoting_engine",
]
