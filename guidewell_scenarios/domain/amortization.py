"""Single-debt payoff calculation using the closed-form amortization formula"""

import math
from datetime import date
from typing import Optional

from guidewell_scenarios.domain.exceptions import InvalidInputError, NonConvergentPaymentError
from guidewell_scenarios.domain.models import DebtPayoffResult
from guidewell_scenarios.utils.date_utils import add_months


def monthly_rate_from_apr(apr_percent: float) -> float:
    """Nominal APR in percent -> monthly rate (24 -> 0.02)"""
    return apr_percent / 100 / 12


def months_to_payoff(balance: float, apr_percent: float, monthly_payment: float) -> int:
    """
    Number of whole months a fixed payment needs to retire a balance.

    Zero APR is straight division. Otherwise:
        n = ceil(-ln(1 - B*r/P) / ln(1 + r))

    Raises:
        InvalidInputError: balance or payment not positive, or APR negative
        NonConvergentPaymentError: payment <= first month's interest (B*r)
    """
    if balance <= 0 or monthly_payment <= 0:
        raise InvalidInputError("Balance and monthly payment must be positive")
    if apr_percent < 0:
        raise InvalidInputError("APR cannot be negative")

    monthly_rate = monthly_rate_from_apr(apr_percent)
    if monthly_rate == 0:
        return math.ceil(balance / monthly_payment)

    # Without this guard the log argument is <= 0 and the result is inf/NaN
    if monthly_payment <= balance * monthly_rate:
        raise NonConvergentPaymentError(balance, monthly_rate, monthly_payment)

    return math.ceil(
        -math.log(1 - balance * monthly_rate / monthly_payment) / math.log(1 + monthly_rate)
    )


def calculate_debt_payoff(
    balance: float,
    apr_percent: float,
    monthly_payment: float,
    minimum_payment: Optional[float] = None,
    start_date: date | None = None,
) -> DebtPayoffResult:
    """
    Payoff schedule summary for one debt paid with a fixed monthly amount.

    The last payment is counted in full, so total_paid = payment * months and
    total_interest slightly overstates the true figure by the final-month
    overpayment. When minimum_payment is given and is lower than
    monthly_payment, interest_savings is the interest avoided compared to
    paying only that minimum (a non-convergent minimum raises).

    Args:
        balance: Outstanding balance (> 0)
        apr_percent: Nominal annual rate in percent (>= 0)
        monthly_payment: Fixed payment per month (> 0)
        minimum_payment: Optional lower payment to compare against
        start_date: Date payments start from (default: today)
    """
    months = months_to_payoff(balance, apr_percent, monthly_payment)
    total_paid = monthly_payment * months
    total_interest = total_paid - balance

    if start_date is None:
        start_date = date.today()

    interest_savings = None
    if minimum_payment and minimum_payment < monthly_payment:
        at_minimum = calculate_debt_payoff(balance, apr_percent, minimum_payment, start_date=start_date)
        interest_savings = at_minimum.total_interest - total_interest

    return DebtPayoffResult(
        months_to_payoff=months,
        total_paid=total_paid,
        total_interest=total_interest,
        monthly_payment=monthly_payment,
        payoff_date=add_months(start_date, months),
        interest_savings=interest_savings,
    )
