"""Strategy components for pluggable ladder generation.

This package provides the component interfaces and default implementations
for the quoting engine's pipeline.
"""

from deriv_maker.strategy.components.base import (
    HeadPriceCalculator,
    LadderBuilder,
    ReservationPriceCalculator,
    TailPriceCalculator,
)
from deriv_maker.strategy.components.ladder import LinearLadder
from deriv_maker.strategy.components.reservation import InventoryReservation
from deriv_maker.strategy.components.spread import MidAnchoredTails, VolatilitySpreadHeads

__all__ = [
    # ABCs
    "ReservationPriceCalculator",
    "HeadPriceCalculator",
    "TailPriceCalculator",
    "LadderBuilder",
    # Implementations
    "InventoryReservation",
    "VolatilitySpreadHeads",
    "MidAnchoredTails",
    "LinearLadder",
]
