"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from guidewell_scenarios.api.main import create_app
from guidewell_scenarios.domain.models import Account, AccountCategory, Goal, Transaction


AS_OF = date(2024, 6, 30)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def sample_accounts() -> list[Account]:
    """One account per category; card and loan carry minimum payments"""
    return [
        Account(id="chk", category=AccountCategory.CHECKING, balance=2500.0),
        Account(id="sav", category=AccountCategory.SAVINGS, balance=4000.0, annual_interest_rate_percent=4.5),
        Account(id="inv", category=AccountCategory.INVESTMENT, balance=12000.0, declared_monthly_contribution=200.0),
        Account(
            id="card",
            category=AccountCategory.CREDIT_CARD,
            balance=3200.0,
            annual_interest_rate_percent=22.9,
            minimum_payment=95.0,
        ),
        Account(
            id="car",
            category=AccountCategory.LOAN,
            balance=9800.0,
            annual_interest_rate_percent=6.5,
            minimum_payment=250.0,
        ),
    ]


@pytest.fixture
def sample_goals() -> list[Goal]:
    return [
        Goal(
            id="rainy-day",
            target_amount=10000.0,
            target_date=date(2025, 12, 31),
            linked_account_ids=("sav",),
            declared_monthly_contribution=150.0,
            current_amount=4000.0,
        ),
        Goal(
            id="vacation",
            target_amount=3000.0,
            target_date=date(2025, 6, 30),
            linked_account_ids=("sav",),
            declared_monthly_contribution=50.0,
        ),
        Goal(
            id="retirement",
            target_amount=500000.0,
            target_date=date(2055, 1, 1),
            linked_account_ids=("inv",),
            declared_monthly_contribution=100.0,
        ),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Two months of activity ending on AS_OF plus one stale payment"""
    return [
        # Debt payments inside the 60-day window: 300 + 250 + 250
        Transaction(account_id="card", date=date(2024, 6, 1), signed_amount=-300.0),
        Transaction(account_id="car", date=date(2024, 6, 15), signed_amount=-250.0),
        Transaction(account_id="car", date=date(2024, 5, 15), signed_amount=-250.0),
        # Outside the window
        Transaction(account_id="car", date=date(2024, 3, 1), signed_amount=-999.0),
        # Savings and investment deposits
        Transaction(account_id="sav", date=date(2024, 6, 1), signed_amount=600.0),
        Transaction(account_id="inv", date=date(2024, 5, 20), signed_amount=400.0),
        # Checking spend is never counted
        Transaction(account_id="chk", date=date(2024, 6, 10), signed_amount=-1200.0),
        Transaction(account_id="chk", date=date(2024, 6, 10), signed_amount=3000.0),
    ]
