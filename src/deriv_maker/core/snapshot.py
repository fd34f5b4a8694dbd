"""Loading of decision inputs from YAML documents.

Used by the command-line entry point to run a single decision from a
file. Expected format:

    market:
      mid_price: "4000"
      volatility: "20"
      timestamp: "2026-01-01T00:00:00+00:00"   # optional
    deposit:
      total_balance: "100000"
      available_balance: "80000"
    position:                                  # optional
      is_long: true
      quantity: "2.5"
      entry_price: "3950"
      margin: "4000"
    open_orders:
      - order_side: buy
        price: "3990"
        quantity: "1"
        order_hash: "0xabc"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from deriv_maker.domain.errors import TradingError
from deriv_maker.domain.market_data import MarketSnapshot
from deriv_maker.domain.orders import RestingOrder
from deriv_maker.domain.positions import Deposit, Position
from deriv_maker.domain.types import OrderSide, Price, Quantity


@dataclass
class DecisionInputs:
    """Everything one call to QuotingEngine.get_action needs."""

    snapshot: MarketSnapshot
    deposit: Deposit
    position: Position | None = None
    open_orders: list[RestingOrder] = field(default_factory=list)


def load_inputs(path: str | Path, market_id: str) -> DecisionInputs:
    """Load decision inputs from a YAML file.

    Args:
        path: Path to the YAML document
        market_id: Market the inputs belong to

    Returns:
        Validated DecisionInputs

    Raises:
        TradingError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise TradingError(f"Snapshot file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TradingError(f"Failed to parse snapshot {path}: {e}") from e

    if not isinstance(data, dict):
        raise TradingError(f"Snapshot root must be a mapping: {path}")

    return parse_inputs(data, market_id)


def parse_inputs(data: dict[str, Any], market_id: str) -> DecisionInputs:
    """Build decision inputs from a parsed document.

    Raises:
        TradingError: If a section is missing, not a mapping or fails validation
    """
    try:
        market = _mapping(data["market"], "market")
        deposit = _mapping(data["deposit"], "deposit")
        snapshot = MarketSnapshot(
            market_id=market_id,
            mid_price=_decimal(market["mid_price"]),
            volatility=_decimal(market["volatility"]),
            timestamp=market.get("timestamp"),
        )
        inputs = DecisionInputs(
            snapshot=snapshot,
            deposit=Deposit(
                total_balance=_decimal(deposit["total_balance"]),
                available_balance=_decimal(
                    deposit.get("available_balance", deposit["total_balance"])
                ),
            ),
            position=_position(data.get("position"), market_id),
            open_orders=[
                _resting_order(_mapping(o, "open_orders item"))
                for o in _sequence(data.get("open_orders"), "open_orders")
            ],
        )
    except KeyError as e:
        raise TradingError(f"Snapshot is missing required key: {e}") from e
    except (ValidationError, ArithmeticError, ValueError, TypeError) as e:
        raise TradingError(f"Invalid snapshot: {e}") from e

    return inputs


def _mapping(value: Any, section: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TradingError(f"Snapshot section {section} must be a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, section: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TradingError(f"Snapshot section {section} must be a list, got {type(value).__name__}")
    return value


def _decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _position(data: Any, market_id: str) -> Position | None:
    if not data:
        return None
    data = _mapping(data, "position")
    return Position(
        market_id=market_id,
        is_long=bool(data["is_long"]),
        quantity=_decimal(data["quantity"]),
        entry_price=_decimal(data["entry_price"]),
        margin=_decimal(data.get("margin", "0")),
    )


def _resting_order(data: dict[str, Any]) -> RestingOrder:
    return RestingOrder(
        order_side=OrderSide(str(data["order_side"]).lower()),
        price=Price(_decimal(data["price"])),
        quantity=Quantity(_decimal(data.get("quantity", "0"))),
        margin=_decimal(data.get("margin", "0")),
        subaccount_id=str(data.get("subaccount_id", "")),
        fee_recipient=str(data.get("fee_recipient", "")),
        order_hash=str(data.get("order_hash", "")),
    )
