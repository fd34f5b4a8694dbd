"""Strategy factory for building quoting engines from configuration.

Provides factory functions to instantiate strategy components and
compose them into a QuotingEngine.
"""

from __future__ import annotations

from deriv_maker.core.config import MakerConfig, RiskParameters
from deriv_maker.domain.market_data import MarketSpec
from deriv_maker.execution.gate import HeadChangeGate
from deriv_maker.strategy.components.ladder import LinearLadder
from deriv_maker.strategy.components.reservation import InventoryReservation
from deriv_maker.strategy.components.spread import MidAnchoredTails, VolatilitySpreadHeads
from deriv_maker.strategy.engine import QuoteContext, QuotingEngine


def create_quoting_engine(config: MakerConfig) -> QuotingEngine:
    """Create a QuotingEngine from configuration.

    Args:
        config: Validated maker configuration

    Returns:
        Configured QuotingEngine
    """
    market = config.market
    context = QuoteContext(
        market_id=market.market_id,
        subaccount_id=market.subaccount_id,
        fee_recipient=market.fee_recipient,
        active_capital=config.risk.active_capital,
        max_market_data_delay=config.risk.max_market_data_delay,
    )
    return build_engine(context, config.risk, market.to_spec())


def build_engine(
    context: QuoteContext,
    risk: RiskParameters,
    market_spec: MarketSpec | None = None,
) -> QuotingEngine:
    """Compose the default components for the given risk parameters.

    Args:
        context: Market identifiers and capital limits
        risk: Validated risk parameters
        market_spec: Optional venue tick sizes

    Returns:
        Configured QuotingEngine
    """
    return QuotingEngine(
        context=context,
        reservation_calculator=InventoryReservation(
            reservation_param=risk.reservation_param,
        ),
        head_calculator=VolatilitySpreadHeads(spread_param=risk.spread_param),
        tail_calculator=MidAnchoredTails(
            tail_distance_from_mid=risk.tail_distance_from_mid,
            min_tail_distance=risk.min_tail_distance,
        ),
        ladder_builder=LinearLadder(
            order_density=risk.order_density,
            leverage=risk.leverage,
            market_spec=market_spec,
        ),
        gate=HeadChangeGate(head_change_tolerance=risk.head_change_tolerance),
    )
