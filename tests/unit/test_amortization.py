"""Unit tests for single-debt payoff calculation"""

import pytest
from datetime import date
from guidewell_scenarios.domain.amortization import (
    calculate_debt_payoff,
    monthly_rate_from_apr,
    months_to_payoff,
)
from guidewell_scenarios.domain.exceptions import InvalidInputError, NonConvergentPaymentError


def test_zero_apr_is_straight_division():
    result = calculate_debt_payoff(1000, 0, 100, start_date=date(2024, 1, 15))

    assert result.months_to_payoff == 10
    assert result.total_paid == 1000
    assert result.total_interest == 0
    assert result.interest_savings is None


def test_zero_apr_rounds_partial_month_up():
    assert months_to_payoff(1050, 0, 100) == 11


def test_payment_below_first_month_interest_raises():
    """5000 at 24% accrues 100 in month one; 90 never catches up"""
    with pytest.raises(NonConvergentPaymentError) as exc_info:
        calculate_debt_payoff(5000, 24, 90)

    assert exc_info.value.first_month_interest == pytest.approx(100)


def test_payment_equal_to_first_month_interest_raises():
    with pytest.raises(NonConvergentPaymentError):
        months_to_payoff(5000, 24, 100)


def test_interest_bearing_payoff():
    """1000 at 12% APR (1%/month) paid at 100/month takes 10.59 -> 11 months"""
    result = calculate_debt_payoff(1000, 12, 100, start_date=date(2024, 1, 1))

    assert result.months_to_payoff == 11
    assert result.total_paid == pytest.approx(1100)
    assert result.total_interest == pytest.approx(100)
    assert result.monthly_payment == 100


def test_interest_savings_against_minimum_payment():
    # At 50/month the same debt takes 23 months and costs 150 in interest
    result = calculate_debt_payoff(1000, 12, 100, minimum_payment=50, start_date=date(2024, 1, 1))

    assert result.interest_savings == pytest.approx(50)


def test_interest_savings_skipped_when_minimum_not_lower():
    result = calculate_debt_payoff(1000, 12, 100, minimum_payment=100, start_date=date(2024, 1, 1))

    assert result.interest_savings is None


def test_non_convergent_minimum_propagates():
    with pytest.raises(NonConvergentPaymentError):
        calculate_debt_payoff(5000, 24, 200, minimum_payment=90)


def test_payoff_date_clamps_to_month_end():
    result = calculate_debt_payoff(1000, 0, 100, start_date=date(2024, 1, 31))

    # 10 months after Jan 31 lands on Nov 30
    assert result.payoff_date == date(2024, 11, 30)


@pytest.mark.parametrize(
    "balance,apr,payment",
    [
        (0, 10, 100),
        (-50, 10, 100),
        (1000, 10, 0),
        (1000, -1, 100),
    ],
)
def test_invalid_inputs_raise(balance, apr, payment):
    with pytest.raises(InvalidInputError):
        calculate_debt_payoff(balance, apr, payment)


def test_monthly_rate_from_apr():
    assert monthly_rate_from_apr(24) == pytest.approx(0.02)
    assert monthly_rate_from_apr(0) == 0
