"""Unit tests for net worth summary and goal progress"""

import pytest
from datetime import date
from guidewell_scenarios.domain.exceptions import InvalidInputError
from guidewell_scenarios.domain.health import calculate_goal_progress, summarize_net_worth
from guidewell_scenarios.domain.models import Account, AccountCategory, Goal


def test_summary_totals(sample_accounts):
    summary = summarize_net_worth(sample_accounts)

    assert summary.total_assets == 18500
    assert summary.total_debt == 13000
    assert summary.net_worth == 5500
    # base 50 + positive net worth 20 + more asset than debt accounts 10
    assert summary.health_score == 80


def test_debt_free_scores_full_marks():
    accounts = [Account(id="sav", category=AccountCategory.SAVINGS, balance=100)]

    assert summarize_net_worth(accounts).health_score == 100


def test_underwater_scores_base():
    accounts = [
        Account(id="chk", category=AccountCategory.CHECKING, balance=100),
        Account(id="loan", category=AccountCategory.LOAN, balance=5000),
    ]

    summary = summarize_net_worth(accounts)

    assert summary.net_worth == -4900
    assert summary.health_score == 50


def test_goal_progress(sample_accounts, sample_goals, as_of):
    # 4000 of 10000, 18 months to Dec 2025
    progress = calculate_goal_progress(sample_goals[0], sample_accounts, as_of=as_of)

    assert progress.progress_percentage == pytest.approx(40)
    assert progress.months_remaining == 18
    assert progress.recommended_monthly_contribution == pytest.approx(6000 / 18)
    assert progress.current_monthly_contribution == 0
    assert progress.is_on_track is False
    assert progress.acceleration_needed == pytest.approx(6000 / 18)


def test_goal_on_track_from_linked_account_contributions(sample_accounts, as_of):
    goal = Goal(
        id="house",
        target_amount=12000,
        target_date=date(2025, 6, 30),
        linked_account_ids=("inv",),
        current_amount=9600,
    )

    progress = calculate_goal_progress(goal, sample_accounts, as_of=as_of)

    # 2400 over 12 months = 200, matched by the investment account's 200
    assert progress.is_on_track is True
    assert progress.acceleration_needed == 0


def test_past_due_goal_has_no_months_left(sample_accounts, as_of):
    goal = Goal(id="late", target_amount=1000, target_date=date(2023, 1, 1), current_amount=1500)

    progress = calculate_goal_progress(goal, sample_accounts, as_of=as_of)

    assert progress.progress_percentage == 100
    assert progress.months_remaining == 0
    assert progress.recommended_monthly_contribution == 0


def test_non_positive_target_raises(sample_accounts):
    with pytest.raises(InvalidInputError):
        calculate_goal_progress(
            Goal(id="zero", target_amount=0, target_date=date(2030, 1, 1)), sample_accounts
        )
