"""Baseline monthly contribution estimate - blends declared intent with observed transaction history"""

from datetime import date
from typing import Collection, Iterable, Optional, Set

from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.models import (
    DEBT_CATEGORIES,
    Account,
    AccountCategory,
    Goal,
    Scope,
    Transaction,
)
from guidewell_scenarios.utils.date_utils import lookback_start
from guidewell_scenarios.utils.money import round_cents

DEFAULT_LOOKBACK_DAYS = 60
DAYS_PER_MONTH = 30

# Strategy focus -> scope, used when the scope is "all"
STRATEGY_FOCUS = {
    "debt_crusher": Scope.DEBT,
    "steady_payer": Scope.DEBT,
    "juggler": Scope.DEBT,
    "interest_minimizer": Scope.DEBT,
    "goal_keeper": Scope.SAVINGS,
    "safety_builder": Scope.SAVINGS,
    "auto_pilot": Scope.SAVINGS,
    "opportunistic_saver": Scope.SAVINGS,
    "nest_builder": Scope.INVESTING,
    "future_investor": Scope.INVESTING,
    "balanced_builder": Scope.INVESTING,
    "risk_taker": Scope.INVESTING,
}

SCOPE_CATEGORIES = {
    Scope.DEBT: DEBT_CATEGORIES,
    Scope.SAVINGS: frozenset({AccountCategory.SAVINGS}),
    Scope.INVESTING: frozenset({AccountCategory.INVESTMENT}),
}


def _account_ids(accounts: Iterable[Account], categories: Collection[AccountCategory]) -> Set[str]:
    return {a.id for a in accounts if a.category in categories}


def _monthly_flow(
    transactions: Iterable[Transaction],
    account_ids: Set[str],
    as_of: date,
    lookback_days: int,
    inflow: bool,
) -> float:
    """Sum of inflows (or outflow magnitudes) in the window, scaled to a 30-day month"""
    start = lookback_start(as_of, lookback_days)
    total = 0.0
    for txn in transactions:
        if txn.account_id not in account_ids or not (start <= txn.date <= as_of):
            continue
        if inflow and txn.signed_amount > 0:
            total += txn.signed_amount
        elif not inflow and txn.signed_amount < 0:
            total += -txn.signed_amount

    days = max(1, lookback_days)
    return total / days * DAYS_PER_MONTH


def observed_monthly_outflow(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    categories: Collection[AccountCategory],
    as_of: date,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> float:
    return _monthly_flow(
        transactions, _account_ids(accounts, categories), as_of, lookback_days, inflow=False
    )


def observed_monthly_inflow(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    categories: Collection[AccountCategory],
    as_of: date,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> float:
    return _monthly_flow(
        transactions, _account_ids(accounts, categories), as_of, lookback_days, inflow=True
    )


def declared_goal_contributions(
    goals: Iterable[Goal],
    accounts: Iterable[Account],
    categories: Collection[AccountCategory],
) -> float:
    """Sum of declared monthly contributions for goals linked to an account in the given categories"""
    ids = _account_ids(accounts, categories)
    return sum(
        g.declared_monthly_contribution
        for g in goals
        if any(account_id in ids for account_id in g.linked_account_ids)
    )


def resolve_scope(scope: Scope, focus: Optional[str] = None) -> Scope:
    """Map the "all" scope onto a concrete one using the chosen strategy focus"""
    if scope != Scope.ALL:
        return scope
    if focus not in STRATEGY_FOCUS:
        raise InvalidInputError(f"Unknown strategy focus for scope 'all': {focus!r}")
    return STRATEGY_FOCUS[focus]


def estimate_baseline_monthly(
    scope: Scope,
    accounts: Collection[Account],
    transactions: Collection[Transaction] = (),
    goals: Collection[Goal] = (),
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    as_of: date | None = None,
    focus: Optional[str] = None,
) -> float:
    """
    Estimate the user's current monthly contribution for a scope.

    Precedence differs by scope and must stay that way:
    - debt: observed outflows from loan/credit card accounts win; the sum of
      minimum payments is the fallback.
    - savings / investing: declared goal contributions win; observed inflows
      to matching accounts are the fallback.

    Only the returned value is rounded to cents.
    """
    if lookback_days < 0:
        raise InvalidInputError("Lookback window cannot be negative")
    if as_of is None:
        as_of = date.today()

    scope = resolve_scope(scope, focus)
    categories = SCOPE_CATEGORIES[scope]

    if scope == Scope.DEBT:
        observed = observed_monthly_outflow(transactions, accounts, categories, as_of, lookback_days)
        declared = sum(a.minimum_payment for a in accounts if a.category in categories)
        return round_cents(observed if observed > 0 else declared)

    observed = observed_monthly_inflow(transactions, accounts, categories, as_of, lookback_days)
    declared = declared_goal_contributions(goals, accounts, categories)
    return round_cents(declared if declared > 0 else observed)
