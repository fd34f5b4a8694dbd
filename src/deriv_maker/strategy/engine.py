"""Quoting engine for ladder generation.

Composes pluggable components to decide, once per trigger, whether the
resting ladders should be replaced and with what.
"""

from __future__ import annotations

import decimal
import logging
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from pydantic.dataclasses import dataclass

from deriv_maker.domain.errors import PricingError, StaleDataError
from deriv_maker.domain.market_data import MarketSnapshot
from deriv_maker.domain.orders import ActionPlan, QuoteLadder, RestingOrder
from deriv_maker.domain.positions import Deposit, Position
from deriv_maker.domain.types import OrderSide
from deriv_maker.execution.gate import HeadChangeGate
from deriv_maker.risk.manager import capital_for_new_orders
from deriv_maker.strategy.book import split_resting_orders
from deriv_maker.strategy.components.base import (
    HeadPriceCalculator,
    LadderBuilder,
    ReservationPriceCalculator,
    TailPriceCalculator,
)
from deriv_maker.strategy.inventory import inventory_imbalance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteContext:
    """Identifiers and limits that stay fixed across invocations."""

    market_id: str
    subaccount_id: str
    fee_recipient: str = ""
    active_capital: Decimal = Decimal("0")
    max_market_data_delay: int = 0  # Seconds, 0 disables the check


@dataclass(frozen=True)
class QuoteDecision:
    """Intermediate prices of one decision, kept for logging and tests."""

    reservation_price: Decimal
    buy_head: Decimal
    sell_head: Decimal
    buy_trips: bool
    sell_trips: bool


class QuotingEngine:
    """Composes strategy components into one quoting decision.

    Pipeline:
    1. inventory_imbalance → i (share of account in the position)
    2. ReservationPriceCalculator → r (inventory-adjusted center)
    3. HeadPriceCalculator → (buy_head, sell_head)
    4. HeadChangeGate → hold or replace
    5. TailPriceCalculator → (buy_tail, sell_tail)
    6. capital_for_new_orders + LadderBuilder → ladders for both sides

    When either side trips the gate both sides are replaced together
    around the single new reservation price.
    """

    def __init__(
        self,
        context: QuoteContext,
        reservation_calculator: ReservationPriceCalculator,
        head_calculator: HeadPriceCalculator,
        tail_calculator: TailPriceCalculator,
        ladder_builder: LadderBuilder,
        gate: HeadChangeGate,
    ) -> None:
        """Initialize with pluggable components.

        Args:
            context: Market identifiers and capital limits
            reservation_calculator: Calculates reservation price
            head_calculator: Calculates head prices
            tail_calculator: Calculates tail prices
            ladder_builder: Builds the price levels for each side
            gate: Hysteresis gate against the resting heads
        """
        self._context = context
        self._reservation = reservation_calculator
        self._heads = head_calculator
        self._tails = tail_calculator
        self._ladder = ladder_builder
        self._gate = gate

    @property
    def context(self) -> QuoteContext:
        """Return the fixed quoting context."""
        return self._context

    def get_action(
        self,
        snapshot: MarketSnapshot,
        resting_orders: Sequence[RestingOrder],
        deposit: Deposit,
        position: Position | None = None,
        now: datetime | None = None,
    ) -> ActionPlan:
        """Decide whether to replace the resting ladders.

        Args:
            snapshot: Current mid price and volatility
            resting_orders: Orders left on the book by the previous decision
            deposit: Account deposit (total balance is the account value)
            position: Current position, or None when flat
            now: Current time, used for the staleness check

        Returns:
            Empty plan to hold, or a cancel-all-and-replace plan

        Raises:
            PricingError: On decimal overflow or invalid arithmetic

        A snapshot older than max_market_data_delay yields an empty plan.
        """
        if position is None:
            position = Position.flat(self._context.market_id)

        if now is not None:
            try:
                self.check_freshness(snapshot, now)
            except StaleDataError as e:
                logger.warning(f"{e}, holding resting orders (limit {e.max_age_seconds}s)")
                return ActionPlan.empty()

        with decimal.localcontext() as ctx:
            ctx.traps[decimal.Overflow] = True
            ctx.traps[decimal.InvalidOperation] = True
            ctx.traps[decimal.DivisionByZero] = True
            try:
                return self._decide(snapshot, resting_orders, deposit, position)
            except decimal.DecimalException as e:
                logger.error(f"Arithmetic fault pricing {self._context.market_id}: {e!r}")
                raise PricingError(
                    f"Arithmetic fault while pricing {self._context.market_id}",
                    stage="get_action",
                    context={
                        "mid_price": str(snapshot.mid_price),
                        "volatility": str(snapshot.volatility),
                    },
                ) from e

    def evaluate(
        self,
        snapshot: MarketSnapshot,
        resting_orders: Sequence[RestingOrder],
        deposit: Deposit,
        position: Position | None = None,
    ) -> QuoteDecision:
        """Compute reservation price, heads and gate outcome without building ladders."""
        open_buys, open_sells = split_resting_orders(resting_orders)
        total_value = deposit.total_balance

        imbalance, is_long = inventory_imbalance(position, total_value)
        reservation = self._reservation.calculate(
            mid_price=snapshot.mid_price,
            imbalance=imbalance,
            volatility=snapshot.volatility,
            is_long=is_long,
        )
        buy_head, sell_head = self._heads.calculate(
            volatility=snapshot.volatility,
            reservation_price=reservation,
        )
        buy_trips, sell_trips = self._gate.trips(open_buys, open_sells, buy_head, sell_head)

        logger.debug(
            f"{snapshot.market_id}: imbalance={imbalance} long={is_long} "
            f"reservation={reservation} heads=({buy_head}, {sell_head})"
        )

        return QuoteDecision(
            reservation_price=reservation,
            buy_head=buy_head,
            sell_head=sell_head,
            buy_trips=buy_trips,
            sell_trips=sell_trips,
        )

    def _decide(
        self,
        snapshot: MarketSnapshot,
        resting_orders: Sequence[RestingOrder],
        deposit: Deposit,
        position: Position,
    ) -> ActionPlan:
        decision = self.evaluate(snapshot, resting_orders, deposit, position)

        if not (decision.buy_trips or decision.sell_trips):
            logger.info(
                f"{snapshot.market_id}: heads within tolerance, holding "
                f"{len(resting_orders)} resting orders"
            )
            return ActionPlan.empty()

        buy_tail, sell_tail = self._tails.calculate(
            buy_head=decision.buy_head,
            sell_head=decision.sell_head,
            mid_price=snapshot.mid_price,
        )

        total_value = deposit.total_balance
        buy_ladder = self._build_side(decision.buy_head, buy_tail, total_value, position, OrderSide.BUY)
        sell_ladder = self._build_side(decision.sell_head, sell_tail, total_value, position, OrderSide.SELL)

        plan = ActionPlan.replace_all(
            market_id=self._context.market_id,
            subaccount_id=self._context.subaccount_id,
            buy_ladder=buy_ladder,
            sell_ladder=sell_ladder,
            fee_recipient=self._context.fee_recipient,
        )
        logger.info(
            f"{snapshot.market_id}: replacing book (buy_trips={decision.buy_trips}, "
            f"sell_trips={decision.sell_trips}), cancelling {len(resting_orders)}, "
            f"creating {len(buy_ladder.levels)} bids [{decision.buy_head} .. {buy_tail}] "
            f"qty={buy_ladder.total_quantity()} margin={buy_ladder.total_margin()} "
            f"and {len(sell_ladder.levels)} asks [{decision.sell_head} .. {sell_tail}] "
            f"qty={sell_ladder.total_quantity()} margin={sell_ladder.total_margin()}"
        )
        return plan

    def _build_side(
        self,
        head: Decimal,
        tail: Decimal,
        total_value: Decimal,
        position: Position,
        order_side: OrderSide,
    ) -> QuoteLadder:
        """Size and build one side's ladder.

        Orders on the same side as the position pay for it with the margin
        already committed; orders on the opposite side flatten it instead.
        """
        opposing_quantity = Decimal("0")
        position_margin = Decimal("0")
        if position.increasing_side() == order_side:
            position_margin = position.margin
        else:
            opposing_quantity = position.quantity

        allocable = capital_for_new_orders(
            total_value,
            position_margin,
            self._context.active_capital,
        )
        return self._ladder.build(
            head=head,
            tail=tail,
            allocable_value=allocable,
            opposing_position_quantity=opposing_quantity,
            order_side=order_side,
        )

    def check_freshness(self, snapshot: MarketSnapshot, now: datetime) -> None:
        """Raise if the snapshot is older than max_market_data_delay.

        Raises:
            StaleDataError: If the snapshot is too old to quote from
        """
        max_delay = self._context.max_market_data_delay
        age = snapshot.age_seconds(now)
        if max_delay <= 0 or age is None or age <= max_delay:
            return

        raise StaleDataError(
            f"Market data for {snapshot.market_id} is {age:.1f}s old",
            age_seconds=age,
            max_age_seconds=max_delay,
        )
