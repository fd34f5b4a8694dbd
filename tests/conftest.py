"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from deriv_maker.core.config import RiskParameters
from deriv_maker.domain.market_data import MarketSnapshot
from deriv_maker.domain.orders import RestingOrder
from deriv_maker.domain.positions import Deposit, Position
from deriv_maker.domain.types import OrderSide, Price, Quantity
from deriv_maker.strategy.engine import QuoteContext

MARKET_ID = "0x17ef48032cb24375ba7c2e39f384e56433bcab20cbee9a7357e4cba2eb00abe6"
SUBACCOUNT_ID = "0xb5e09b93aceb70c1711af078922fa256011d7e56000000000000000000000001"


def _make_order(side: OrderSide, price: str, quantity: str = "1", order_hash: str = "") -> RestingOrder:
    return RestingOrder(
        order_side=side,
        price=Price(Decimal(price)),
        quantity=Quantity(Decimal(quantity)),
        order_hash=order_hash,
    )


@pytest.fixture
def make_order() -> Callable[..., RestingOrder]:
    """Factory for resting orders built from string prices."""
    return _make_order


@pytest.fixture
def risk_params() -> RiskParameters:
    """Typical risk parameters for a BTC perpetual."""
    return RiskParameters(
        leverage=Decimal("2"),
        order_density=5,
        max_market_data_delay=30,
        reservation_param=Decimal("0.5"),
        spread_param=Decimal("0.2"),
        active_capital=Decimal("0.2"),
        head_change_tolerance=Decimal("0.01"),
        tail_distance_from_mid=Decimal("0.05"),
        min_tail_distance=Decimal("0.01"),
    )


@pytest.fixture
def snapshot() -> MarketSnapshot:
    """Mid 4000 with volatility 20."""
    return MarketSnapshot(
        market_id=MARKET_ID,
        mid_price=Decimal("4000"),
        volatility=Decimal("20"),
    )


@pytest.fixture
def deposit() -> Deposit:
    """Account worth 100,000."""
    return Deposit(
        total_balance=Decimal("100000"),
        available_balance=Decimal("100000"),
    )


@pytest.fixture
def long_position() -> Position:
    """Long 5 contracts entered at 4000 (20% of a 100,000 account)."""
    return Position(
        market_id=MARKET_ID,
        is_long=True,
        quantity=Decimal("5"),
        entry_price=Decimal("4000"),
        margin=Decimal("10000"),
    )


@pytest.fixture
def short_position() -> Position:
    """Short 5 contracts entered at 4000."""
    return Position(
        market_id=MARKET_ID,
        is_long=False,
        quantity=Decimal("5"),
        entry_price=Decimal("4000"),
        margin=Decimal("10000"),
    )


@pytest.fixture
def quote_context(risk_params: RiskParameters) -> QuoteContext:
    """Quoting context for the test market."""
    return QuoteContext(
        market_id=MARKET_ID,
        subaccount_id=SUBACCOUNT_ID,
        fee_recipient="inj1feerecipient",
        active_capital=risk_params.active_capital,
        max_market_data_delay=risk_params.max_market_data_delay,
    )
