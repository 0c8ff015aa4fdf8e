"""Debt payoff ordering comparison - snowball (smallest balance first) vs avalanche (highest APR first)"""

import logging
from typing import Iterable, List

from guidewell_scenarios.domain.amortization import months_to_payoff
from guidewell_scenarios.domain.exceptions import InvalidInputError, NoDebtsError
from guidewell_scenarios.domain.models import (
    Account,
    DebtPayoffStep,
    DebtStrategyComparison,
    StrategyPlan,
)
from guidewell_scenarios.utils.money import round_cents

logger = logging.getLogger(__name__)

SNOWBALL = "snowball"
AVALANCHE = "avalanche"

DEFAULT_MINIMUM_PAYMENT_RATE = 0.02  # 2% of balance when no minimum is on file


def effective_minimum_payment(account: Account, fallback_rate: float = DEFAULT_MINIMUM_PAYMENT_RATE) -> float:
    """Stated minimum payment, or a share of the balance when none is recorded"""
    return account.minimum_payment or account.balance * fallback_rate


def snowball_order(debts: Iterable[Account]) -> List[Account]:
    """Ascending by balance; equal balances keep their input order"""
    return sorted(debts, key=lambda a: a.balance)


def avalanche_order(debts: Iterable[Account]) -> List[Account]:
    """Descending by APR; equal rates keep their input order"""
    return sorted(debts, key=lambda a: a.annual_interest_rate_percent, reverse=True)


def simulate_ordering(
    name: str,
    ordering: List[Account],
    fallback_rate: float = DEFAULT_MINIMUM_PAYMENT_RATE,
) -> StrategyPlan:
    """
    Sequential payoff with a cascading payment waterfall.

    Each debt is amortized from its own first simulated month with its own
    minimum plus every minimum freed by the debts retired before it in the
    ordering. The freed amount is available from that first month on; there
    is no lag month between one debt's payoff and the next debt's boost.
    """
    freed = 0.0
    steps = []
    total_interest = 0.0

    for account in ordering:
        minimum = effective_minimum_payment(account, fallback_rate)
        payment = minimum + freed
        months = months_to_payoff(
            account.balance, account.annual_interest_rate_percent, payment
        )
        interest = payment * months - account.balance

        steps.append(
            DebtPayoffStep(
                account=account,
                minimum_payment=minimum,
                monthly_payment=payment,
                months_to_payoff=months,
                total_interest=interest,
            )
        )
        total_interest += interest
        freed += minimum

    return StrategyPlan(name=name, steps=tuple(steps), total_interest=round_cents(total_interest))


def compare_strategies(
    accounts: Iterable[Account],
    fallback_rate: float = DEFAULT_MINIMUM_PAYMENT_RATE,
) -> DebtStrategyComparison:
    """
    Compare snowball and avalanche total interest for the debt accounts given.

    Non-debt accounts are ignored. Avalanche is recommended only when it is
    strictly cheaper; ties go to snowball. savings is always the absolute
    difference so callers can show both options.

    Raises:
        NoDebtsError: no credit card or loan accounts supplied
        InvalidInputError: a debt with a non-positive balance
        NonConvergentPaymentError: a cascaded payment that never retires its debt
    """
    debts = [a for a in accounts if a.is_debt]
    if not debts:
        raise NoDebtsError("No debt accounts found")

    for debt in debts:
        if debt.balance <= 0:
            raise InvalidInputError(f"Debt account {debt.id} has non-positive balance")

    snowball = simulate_ordering(SNOWBALL, snowball_order(debts), fallback_rate)
    avalanche = simulate_ordering(AVALANCHE, avalanche_order(debts), fallback_rate)

    recommendation = AVALANCHE if avalanche.total_interest < snowball.total_interest else SNOWBALL
    savings = round_cents(abs(snowball.total_interest - avalanche.total_interest))

    logger.debug(
        "Debt strategies compared",
        extra={
            "debt_count": len(debts),
            "snowball_interest": snowball.total_interest,
            "avalanche_interest": avalanche.total_interest,
            "recommendation": recommendation,
        },
    )

    return DebtStrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        recommendation=recommendation,
        savings=savings,
    )
