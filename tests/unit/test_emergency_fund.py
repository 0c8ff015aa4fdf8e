"""Unit tests for emergency fund planning"""

import pytest
from guidewell_scenarios.domain.emergency_fund import plan_emergency_fund
from guidewell_scenarios.domain.exceptions import InvalidInputError


def test_default_contribution_is_ten_percent_of_expenses():
    result = plan_emergency_fund(monthly_expenses=2000, target_months=6, current_savings=3000)

    assert result.target_amount == 12000
    assert result.remaining_amount == 9000
    assert result.is_complete is False
    assert result.recommended_monthly_contribution == pytest.approx(200)
    assert result.months_to_complete == 45


def test_given_contribution_drives_timeline():
    result = plan_emergency_fund(2000, 6, 3000, monthly_contribution=500)

    assert result.recommended_monthly_contribution == 500
    assert result.months_to_complete == 18


def test_partial_month_rounds_up():
    result = plan_emergency_fund(1000, 3, 0, monthly_contribution=700)

    assert result.months_to_complete == 5  # 3000 / 700 = 4.29


def test_complete_fund_needs_nothing():
    result = plan_emergency_fund(2000, 6, 15000, monthly_contribution=500)

    assert result.is_complete is True
    assert result.remaining_amount == 0
    assert result.months_to_complete == 0
    assert result.recommended_monthly_contribution == 0


def test_zero_contribution_falls_back_to_default():
    result = plan_emergency_fund(1500, 4, 0, monthly_contribution=0)

    assert result.recommended_monthly_contribution == pytest.approx(150)
    assert result.months_to_complete == 40


def test_custom_default_rate():
    result = plan_emergency_fund(1000, 3, 0, default_contribution_rate=0.25)

    assert result.recommended_monthly_contribution == pytest.approx(250)
    assert result.months_to_complete == 12


def test_zero_expenses_is_already_complete():
    result = plan_emergency_fund(0, 6, 0)

    assert result.is_complete is True
    assert result.months_to_complete == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"monthly_expenses": -1, "target_months": 3, "current_savings": 0},
        {"monthly_expenses": 1000, "target_months": -3, "current_savings": 0},
        {"monthly_expenses": 1000, "target_months": 3, "current_savings": -5},
        {"monthly_expenses": 1000, "target_months": 3, "current_savings": 0, "monthly_contribution": -10},
        {"monthly_expenses": 1000, "target_months": 3, "current_savings": 0, "default_contribution_rate": 0},
    ],
)
def test_invalid_inputs_raise(kwargs):
    with pytest.raises(InvalidInputError):
        plan_emergency_fund(**kwargs)
