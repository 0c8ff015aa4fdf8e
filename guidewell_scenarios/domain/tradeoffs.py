"""Quick trade-off estimates used when comparing where an extra dollar should go"""

import math
from typing import Optional

from guidewell_scenarios.domain.exceptions import InvalidInputError

# Returned by months_to_reach when the target can never be reached
UNREACHABLE = None

TIMEFRAME_MONTHS = {"short": 12, "mid": 60, "long": 120}


def months_for_timeframe(timeframe: str) -> int:
    if timeframe not in TIMEFRAME_MONTHS:
        raise InvalidInputError(f"Unknown timeframe: {timeframe!r}")
    return TIMEFRAME_MONTHS[timeframe]


def future_value_monthly(monthly: float, annual_return_percent: float, months: int) -> float:
    """Future value of a level end-of-month contribution"""
    r = annual_return_percent / 100 / 12
    if r == 0:
        return monthly * months
    return monthly * (((1 + r) ** months - 1) / r)


def months_to_reach(target: float, current: float, monthly: float) -> Optional[int]:
    """
    Whole months until current + monthly * n >= target.

    Returns 0 when the target is already met and UNREACHABLE when the
    contribution is zero or negative, since "never" is a valid answer.
    """
    remaining = max(0.0, target - current)
    if remaining == 0:
        return 0
    if monthly <= 0:
        return UNREACHABLE
    return math.ceil(remaining / monthly)


def extra_principal_reduced(extra_monthly_to_debt: float, months: int) -> float:
    """Principal retired by extra payments, ignoring interest timing (1:1 estimate)"""
    return extra_monthly_to_debt * months


def investing_opportunity_cost(missed_monthly: float, months: int, annual_return_percent: float = 6.0) -> float:
    """What a monthly amount would have grown to had it been invested"""
    return future_value_monthly(missed_monthly, annual_return_percent, months)


def calculate_cagr(beginning_value: float, ending_value: float, years: float) -> float:
    """Compound annual growth rate as a fraction (0.07 = 7%)"""
    if beginning_value <= 0 or years <= 0:
        raise InvalidInputError("Beginning value and years must be positive")
    if ending_value < 0:
        raise InvalidInputError("Ending value cannot be negative")
    return (ending_value / beginning_value) ** (1 / years) - 1
