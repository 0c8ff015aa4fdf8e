"""Emergency fund target, shortfall and timeline"""

import math
from typing import Optional

from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.models import EmergencyFundResult

DEFAULT_CONTRIBUTION_RATE = 0.10  # recommend 10% of monthly expenses


def plan_emergency_fund(
    monthly_expenses: float,
    target_months: float,
    current_savings: float,
    monthly_contribution: Optional[float] = None,
    default_contribution_rate: float = DEFAULT_CONTRIBUTION_RATE,
) -> EmergencyFundResult:
    """
    Size an emergency fund and estimate how long it takes to fill.

    When no positive contribution is supplied the plan recommends
    default_contribution_rate * monthly_expenses. months_to_complete is 0
    only when the fund is already complete.
    """
    if monthly_expenses < 0 or current_savings < 0 or target_months < 0:
        raise InvalidInputError("Expenses, savings and target months cannot be negative")
    if monthly_contribution is not None and monthly_contribution < 0:
        raise InvalidInputError("Monthly contribution cannot be negative")

    target_amount = monthly_expenses * target_months
    remaining = max(0.0, target_amount - current_savings)
    is_complete = remaining == 0

    months_to_complete = 0
    recommended = 0.0
    if not is_complete:
        recommended = monthly_contribution or monthly_expenses * default_contribution_rate
        if recommended <= 0:
            raise InvalidInputError("Default contribution rate must be positive")
        months_to_complete = math.ceil(remaining / recommended)

    return EmergencyFundResult(
        target_amount=target_amount,
        remaining_amount=remaining,
        months_to_complete=months_to_complete,
        is_complete=is_complete,
        recommended_monthly_contribution=recommended,
    )
