"""Monetary rounding helpers"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round_cents(amount: float) -> float:
    """Round half-up to cents (2.675 -> 2.68, unlike the built-in round)"""
    return float(Decimal(repr(amount)).quantize(CENT, rounding=ROUND_HALF_UP))
