"""Net worth summary and goal progress"""

from datetime import date
from typing import Iterable

from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.models import (
    ASSET_CATEGORIES,
    Account,
    Goal,
    GoalProgress,
    NetWorthSummary,
)
from guidewell_scenarios.utils.date_utils import whole_months_until


def summarize_net_worth(accounts: Iterable[Account]) -> NetWorthSummary:
    """
    Totals and a simplified 0-100 health score.

    Score weights:
    - 50 base
    - +20 positive net worth
    - +20 no debt at all
    - +10 more asset accounts than debt accounts
    """
    assets = [a for a in accounts if a.category in ASSET_CATEGORIES]
    debts = [a for a in accounts if a.is_debt]

    total_assets = sum(a.balance for a in assets)
    total_debt = sum(a.balance for a in debts)
    net_worth = total_assets - total_debt

    score = 50
    if net_worth > 0:
        score += 20
    if total_debt == 0:
        score += 20
    if len(assets) > len(debts):
        score += 10

    return NetWorthSummary(
        total_assets=total_assets,
        total_debt=total_debt,
        net_worth=net_worth,
        health_score=min(100, max(0, score)),
    )


def calculate_goal_progress(
    goal: Goal,
    accounts: Iterable[Account],
    as_of: date | None = None,
) -> GoalProgress:
    """Progress toward a goal and the monthly pace needed to hit its target date"""
    if goal.target_amount <= 0:
        raise InvalidInputError("Goal target amount must be positive")
    if as_of is None:
        as_of = date.today()

    progress = min(100.0, goal.current_amount / goal.target_amount * 100)
    months_remaining = whole_months_until(as_of, goal.target_date)

    remaining_amount = max(0.0, goal.target_amount - goal.current_amount)
    recommended = remaining_amount / months_remaining if months_remaining > 0 else 0.0

    linked = set(goal.linked_account_ids)
    current = sum(a.declared_monthly_contribution for a in accounts if a.id in linked)

    return GoalProgress(
        progress_percentage=progress,
        months_remaining=months_remaining,
        recommended_monthly_contribution=recommended,
        current_monthly_contribution=current,
        is_on_track=current >= recommended,
        acceleration_needed=max(0.0, recommended - current),
    )
