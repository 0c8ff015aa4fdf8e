"""Month-indexed net-worth trajectory with goal milestone detection"""

from typing import List, Optional

from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.models import (
    CategoryBalances,
    GrowthRates,
    ProjectionPoint,
    StrategyConfig,
)
from guidewell_scenarios.utils.money import round_cents

DEFAULT_ANNUAL_RETURN_PERCENT = 6.0

# Share of the assumed market return each asset category earns
CHECKING_GROWTH_SHARE = 0.1
SAVINGS_GROWTH_SHARE = 0.3
INVESTMENT_GROWTH_SHARE = 1.0

TIMELINE_PRESETS = {"1yr": 12, "2yr": 24, "3yr": 36, "5yr": 60, "10yr": 120}


def default_growth_rates(
    annual_return_percent: float = DEFAULT_ANNUAL_RETURN_PERCENT,
    checking_share: float = CHECKING_GROWTH_SHARE,
    savings_share: float = SAVINGS_GROWTH_SHARE,
    investment_share: float = INVESTMENT_GROWTH_SHARE,
) -> GrowthRates:
    """Monthly rates derived from one assumed annual return (6% -> 0.0005 / 0.0015 / 0.005)"""
    monthly_return = annual_return_percent / 100 / 12
    return GrowthRates(
        checking=monthly_return * checking_share,
        savings=monthly_return * savings_share,
        investment=monthly_return * investment_share,
    )


def horizon_for_preset(preset: str) -> int:
    if preset not in TIMELINE_PRESETS:
        raise InvalidInputError(f"Unknown timeline preset: {preset!r}")
    return TIMELINE_PRESETS[preset]


def _validate(balances: CategoryBalances, config: StrategyConfig, growth: GrowthRates) -> None:
    if config.horizon_months < 1:
        raise InvalidInputError("Horizon must be at least one month")
    if config.extra_monthly_amount < 0:
        raise InvalidInputError("Extra monthly amount cannot be negative")

    allocation = config.allocation
    if min(allocation.debt_pct, allocation.savings_pct, allocation.investing_pct) < 0:
        raise InvalidInputError("Allocation percentages cannot be negative")
    if min(balances.checking, balances.savings, balances.investment, balances.debt) < 0:
        raise InvalidInputError("Balances cannot be negative")
    if min(growth.checking, growth.savings, growth.investment) <= -1:
        raise InvalidInputError("Monthly growth rate must be greater than -100%")


def generate_trajectory(
    balances: CategoryBalances,
    config: StrategyConfig,
    growth: GrowthRates,
    target_net_worth: float,
) -> List[ProjectionPoint]:
    """
    Project per-category balances for months 0..horizon.

    Each asset category compounds independently: (start + allocated extra to
    date) * (1 + rate)^month. Checking receives no allocation. Debt falls by
    its allocated share of the extra amount each month and is clamped at 0;
    debt interest is not modeled. Amounts are rounded to cents per point and
    the milestone is the first point whose rounded net worth reaches the
    target. The series is regenerated from inputs, never resumed.
    """
    _validate(balances, config, growth)

    extra = config.extra_monthly_amount
    to_debt = extra * config.allocation.debt_pct / 100
    to_savings = extra * config.allocation.savings_pct / 100
    to_investing = extra * config.allocation.investing_pct / 100

    points: List[ProjectionPoint] = []
    milestone_found = False

    for month in range(config.horizon_months + 1):
        checking = balances.checking * (1 + growth.checking) ** month
        savings = (balances.savings + to_savings * month) * (1 + growth.savings) ** month
        investment = (balances.investment + to_investing * month) * (1 + growth.investment) ** month
        debt = max(0.0, balances.debt - to_debt * month)
        net_worth = round_cents(checking + savings + investment - debt)

        is_milestone = not milestone_found and net_worth >= target_net_worth
        milestone_found = milestone_found or is_milestone

        points.append(
            ProjectionPoint(
                month=month,
                checking_balance=round_cents(checking),
                savings_balance=round_cents(savings),
                investment_balance=round_cents(investment),
                debt_balance=round_cents(debt),
                net_worth=net_worth,
                is_milestone=is_milestone,
            )
        )

    return points


def find_milestone(points: List[ProjectionPoint]) -> Optional[ProjectionPoint]:
    return next((p for p in points if p.is_milestone), None)
