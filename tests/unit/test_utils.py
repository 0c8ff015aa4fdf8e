"""Unit tests for date and money helpers"""

from datetime import date
from guidewell_scenarios.utils.date_utils import (
    add_months,
    lookback_start,
    months_between,
    whole_months_until,
)
from guidewell_scenarios.utils.money import round_cents


def test_add_months_across_year_end():
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)


def test_add_months_clamps_to_leap_february():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)


def test_add_zero_months():
    assert add_months(date(2024, 5, 5), 0) == date(2024, 5, 5)


def test_lookback_start():
    assert lookback_start(date(2024, 6, 30), 60) == date(2024, 5, 1)


def test_months_between_uses_average_month():
    assert months_between(date(2024, 1, 1), date(2024, 12, 31)) == 12
    assert months_between(date(2024, 1, 1), date(2025, 1, 1)) == 13  # 366 days / 30.44
    assert months_between(date(2024, 1, 1), date(2024, 1, 2)) == 1
    assert months_between(date(2024, 1, 1), date(2023, 1, 1)) == 1


def test_whole_months_until():
    assert whole_months_until(date(2024, 6, 30), date(2025, 12, 1)) == 18
    assert whole_months_until(date(2024, 6, 30), date(2024, 1, 1)) == 0


def test_round_cents_half_up():
    assert round_cents(2.675) == 2.68
    assert round_cents(1.005) == 1.01
    assert round_cents(-1.005) == -1.01
    assert round_cents(400.00000000000006) == 400.0
