"""Unit tests for trade-off helpers"""

import pytest
from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.tradeoffs import (
    UNREACHABLE,
    calculate_cagr,
    extra_principal_reduced,
    future_value_monthly,
    investing_opportunity_cost,
    months_for_timeframe,
    months_to_reach,
)


def test_months_to_reach_rounds_up():
    assert months_to_reach(target=1000, current=200, monthly=100) == 8
    assert months_to_reach(target=1000, current=250, monthly=100) == 8


def test_months_to_reach_target_already_met():
    assert months_to_reach(target=1000, current=1500, monthly=0) == 0


def test_zero_contribution_is_unreachable_not_an_error():
    assert months_to_reach(target=1000, current=200, monthly=0) is UNREACHABLE
    assert months_to_reach(target=1000, current=200, monthly=-50) is UNREACHABLE


def test_future_value_zero_rate():
    assert future_value_monthly(100, 0, 12) == 1200


def test_future_value_with_return():
    # 100/month at 6% for 12 months
    assert future_value_monthly(100, 6, 12) == pytest.approx(1233.56, abs=0.01)


def test_opportunity_cost_uses_future_value():
    assert investing_opportunity_cost(250, 60, 6) == pytest.approx(future_value_monthly(250, 6, 60))


def test_extra_principal_reduced_is_linear():
    assert extra_principal_reduced(150, 12) == 1800


def test_months_for_timeframe():
    assert [months_for_timeframe(t) for t in ("short", "mid", "long")] == [12, 60, 120]
    with pytest.raises(InvalidInputError):
        months_for_timeframe("eventually")


def test_cagr():
    assert calculate_cagr(100, 121, 2) == pytest.approx(0.10)


@pytest.mark.parametrize("beginning,ending,years", [(0, 100, 1), (100, 200, 0), (100, -1, 1)])
def test_cagr_invalid_inputs(beginning, ending, years):
    with pytest.raises(InvalidInputError):
        calculate_cagr(beginning, ending, years)
