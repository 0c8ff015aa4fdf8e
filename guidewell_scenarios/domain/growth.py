"""Compound growth of an investment or savings balance under monthly contributions"""

from typing import List

from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.models import GrowthResult, YearlySnapshot


def escalated_contribution(monthly_contribution: float, escalation_percent: float, month: int) -> float:
    """Contribution for a 1-based month, raised once per completed year by escalation_percent"""
    year_index = (month - 1) // 12
    return monthly_contribution * (1 + escalation_percent / 100) ** year_index


def project_growth(
    initial_amount: float,
    monthly_contribution: float,
    annual_return_percent: float,
    years: float,
    annual_contribution_escalation_percent: float = 0.0,
) -> GrowthResult:
    """
    Project the value of a balance after `years` of monthly compounding.

    finalValue = P*(1+r)^N + sum_m c_m * (1+r)^(N-m), m = 1..N

    Contributions land at the end of each month, so the month-N contribution
    earns nothing. A zero return degenerates to simple accumulation. Yearly
    snapshots record the balance at the end of every 12th month; the last
    one equals finalValue when N is a whole number of years.

    Raises:
        InvalidInputError: negative amounts, a horizon under one month or a
            return that wipes out the balance each month
    """
    if initial_amount < 0 or monthly_contribution < 0:
        raise InvalidInputError("Initial amount and monthly contribution cannot be negative")

    total_months = round(years * 12)
    if years <= 0 or total_months < 1:
        raise InvalidInputError("Projection must span at least one month")

    monthly_rate = annual_return_percent / 100 / 12
    growth_factor = 1 + monthly_rate
    if growth_factor <= 0:
        raise InvalidInputError("Annual return must be above -1200%")

    final_value = initial_amount * growth_factor**total_months
    total_contributed = initial_amount
    running_balance = initial_amount
    snapshots: List[YearlySnapshot] = []

    for month in range(1, total_months + 1):
        contribution = escalated_contribution(
            monthly_contribution, annual_contribution_escalation_percent, month
        )
        final_value += contribution * growth_factor ** (total_months - month)
        total_contributed += contribution
        running_balance = running_balance * growth_factor + contribution

        if month % 12 == 0:
            snapshots.append(YearlySnapshot(year=month // 12, value=running_balance))

    return GrowthResult(
        final_value=final_value,
        total_contributed=total_contributed,
        growth=final_value - total_contributed,
        monthly_rate=monthly_rate,
        annual_return_percent=annual_return_percent,
        projected_value_by_year=snapshots,
    )
