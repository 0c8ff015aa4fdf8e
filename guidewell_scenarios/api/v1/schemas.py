"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from guidewell_scenarios.domain.models import (
    Account,
    AccountCategory,
    Allocation,
    CategoryBalances,
    Goal,
    GrowthRates,
    Scope,
    Transaction,
)


class AccountSchema(BaseModel):
    """Account snapshot; debt balances as positive magnitudes"""

    id: str = Field(..., min_length=1)
    category: AccountCategory
    balance: float = Field(..., ge=0)
    annual_interest_rate_percent: float = Field(0.0, ge=0)
    declared_monthly_contribution: float = Field(0.0, ge=0)
    minimum_payment: float = Field(0.0, ge=0)

    def to_domain(self) -> Account:
        return Account(**self.model_dump())


class GoalSchema(BaseModel):
    id: str = Field(..., min_length=1)
    target_amount: float
    target_date: date
    linked_account_ids: List[str] = []
    declared_monthly_contribution: float = Field(0.0, ge=0)
    priority: int = 0
    current_amount: float = Field(0.0, ge=0)

    def to_domain(self) -> Goal:
        data = self.model_dump()
        data["linked_account_ids"] = tuple(self.linked_account_ids)
        return Goal(**data)


class TransactionSchema(BaseModel):
    account_id: str
    date: date
    signed_amount: float = Field(..., description="Positive = inflow, negative = outflow")

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


# Debts


class PayoffRequest(BaseModel):
    """Request body for POST /v1/debts/payoff"""

    balance: float
    apr_percent: float
    monthly_payment: float
    minimum_payment: Optional[float] = None
    start_date: Optional[date] = None


class PayoffResponse(BaseModel):
    months_to_payoff: int
    total_paid: float
    total_interest: float
    monthly_payment: float
    payoff_date: date
    interest_savings: Optional[float] = None


class StrategyRequest(BaseModel):
    """Request body for POST /v1/debts/strategy"""

    debts: List[AccountSchema]


class PayoffStepSchema(BaseModel):
    account_id: str
    balance: float
    annual_interest_rate_percent: float
    minimum_payment: float
    monthly_payment: float
    months_to_payoff: int
    total_interest: float


class StrategyPlanSchema(BaseModel):
    total_interest: float
    steps: List[PayoffStepSchema]


class StrategyResponse(BaseModel):
    snowball: StrategyPlanSchema
    avalanche: StrategyPlanSchema
    recommendation: str
    savings: float


# Savings


class GrowthRequest(BaseModel):
    """Request body for POST /v1/savings/growth"""

    initial_amount: float = 0.0
    monthly_contribution: float = 0.0
    annual_return_percent: float
    years: float
    annual_contribution_escalation_percent: float = 0.0


class YearlySnapshotSchema(BaseModel):
    year: int
    value: float


class GrowthResponse(BaseModel):
    final_value: float
    total_contributed: float
    growth: float
    monthly_rate: float
    annual_return_percent: float
    projected_value_by_year: List[YearlySnapshotSchema]


class EmergencyFundRequest(BaseModel):
    """Request body for POST /v1/savings/emergency-fund"""

    monthly_expenses: float
    target_months: float = Field(..., description="Typically 3 to 6")
    current_savings: float = 0.0
    monthly_contribution: Optional[float] = None


class EmergencyFundResponse(BaseModel):
    target_amount: float
    remaining_amount: float
    months_to_complete: int
    is_complete: bool
    recommended_monthly_contribution: float


# Baseline


class BaselineRequest(BaseModel):
    """Request body for POST /v1/baseline"""

    scope: Scope
    focus: Optional[str] = Field(None, description="Strategy focus, required for scope 'all'")
    accounts: List[AccountSchema]
    transactions: List[TransactionSchema] = []
    goals: List[GoalSchema] = []
    lookback_days: Optional[int] = None
    as_of: Optional[date] = None


class BaselineResponse(BaseModel):
    scope: Scope
    monthly_amount: float


# Scenarios


class AllocationSchema(BaseModel):
    debt_pct: float = 0.0
    savings_pct: float = 0.0
    investing_pct: float = 0.0

    def to_domain(self) -> Allocation:
        return Allocation(**self.model_dump())


class BalancesSchema(BaseModel):
    checking: float = 0.0
    savings: float = 0.0
    investment: float = 0.0
    debt: float = 0.0

    def to_domain(self) -> CategoryBalances:
        return CategoryBalances(**self.model_dump())


class GrowthRatesSchema(BaseModel):
    """Monthly growth rates per asset category"""

    checking: float = 0.0
    savings: float = 0.0
    investment: float = 0.0

    def to_domain(self) -> GrowthRates:
        return GrowthRates(**self.model_dump())


class TrajectoryRequest(BaseModel):
    """Request body for POST /v1/scenarios/trajectory

    Horizon precedence: horizon_months, then timeline preset, then end_date,
    then the configured default.
    """

    balances: BalancesSchema
    extra_monthly_amount: float = 0.0
    allocation: AllocationSchema
    target_net_worth: float
    horizon_months: Optional[int] = None
    timeline: Optional[str] = Field(None, description="1yr, 2yr, 3yr, 5yr or 10yr")
    end_date: Optional[date] = None
    growth_rates: Optional[GrowthRatesSchema] = None
    annual_return_percent: Optional[float] = None


class ProjectionPointSchema(BaseModel):
    month: int
    checking_balance: float
    savings_balance: float
    investment_balance: float
    debt_balance: float
    net_worth: float
    is_milestone: bool


class TrajectoryResponse(BaseModel):
    horizon_months: int
    milestone_month: Optional[int] = None
    points: List[ProjectionPointSchema]


class SummaryRequest(BaseModel):
    """Request body for POST /v1/summary"""

    accounts: List[AccountSchema]
    goals: List[GoalSchema] = []
    as_of: Optional[date] = None


class GoalProgressSchema(BaseModel):
    goal_id: str
    progress_percentage: float
    months_remaining: int
    recommended_monthly_contribution: float
    current_monthly_contribution: float
    is_on_track: bool
    acceleration_needed: float


class SummaryResponse(BaseModel):
    total_assets: float
    total_debt: float
    net_worth: float
    health_score: int
    goals: List[GoalProgressSchema]
