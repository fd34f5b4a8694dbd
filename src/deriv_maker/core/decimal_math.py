"""Decimal arithmetic helpers shared by the pricing pipeline."""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

BASIS_POINTS_PER_UNIT = Decimal("10000")


def absolute_difference(a: Decimal, b: Decimal) -> Decimal:
    """Return |a - b|, always subtracting the smaller from the larger."""
    return a - b if a >= b else b - a


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero.

    Zero volatility or a zero account value are legitimate during
    bootstrap and must not abort the pipeline.
    """
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator


def basis_points_to_fraction(bp: Decimal) -> Decimal:
    """Convert basis points to a fraction (100 bp -> 0.01)."""
    return bp / BASIS_POINTS_PER_UNIT


def round_down_to_tick(value: Decimal, tick: Decimal | None) -> Decimal:
    """Floor value to a multiple of tick (no-op without a tick)."""
    if tick is None:
        return value
    return (value / tick).to_integral_value(rounding=ROUND_FLOOR) * tick


def round_up_to_tick(value: Decimal, tick: Decimal | None) -> Decimal:
    """Ceil value to a multiple of tick (no-op without a tick)."""
    if tick is None:
        return value
    return (value / tick).to_integral_value(rounding=ROUND_CEILING) * tick


def clamp(value: Decimal, lower: Decimal, upper: Decimal) -> Decimal:
    """Clamp value into [lower, upper]."""
    return max(lower, min(value, upper))
