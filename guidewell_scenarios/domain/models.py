"""Domain models - pure Python dataclasses representing planning inputs and results"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple


class AccountCategory(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    CREDIT_CARD = "credit_card"
    LOAN = "loan"


ASSET_CATEGORIES = frozenset(
    {AccountCategory.CHECKING, AccountCategory.SAVINGS, AccountCategory.INVESTMENT}
)
DEBT_CATEGORIES = frozenset({AccountCategory.CREDIT_CARD, AccountCategory.LOAN})


class Scope(str, Enum):
    """Category a baseline contribution is estimated for"""

    DEBT = "debt"
    SAVINGS = "savings"
    INVESTING = "investing"
    ALL = "all"


@dataclass(frozen=True)
class Account:
    """Read-only account snapshot supplied by the state store.

    Debt balances are stored as positive magnitudes.
    """

    id: str
    category: AccountCategory
    balance: float
    annual_interest_rate_percent: float = 0.0
    declared_monthly_contribution: float = 0.0
    minimum_payment: float = 0.0

    @property
    def is_debt(self) -> bool:
        return self.category in DEBT_CATEGORIES


@dataclass(frozen=True)
class Goal:
    """Savings or investing goal, used to seed baselines and milestone targets"""

    id: str
    target_amount: float
    target_date: date
    linked_account_ids: Tuple[str, ...] = ()
    declared_monthly_contribution: float = 0.0
    priority: int = 0
    current_amount: float = 0.0


@dataclass(frozen=True)
class Transaction:
    """Bank transaction; positive = inflow, negative = outflow"""

    account_id: str
    date: date
    signed_amount: float


@dataclass(frozen=True)
class Allocation:
    """Split of the extra monthly amount, in percent.

    Percentages must be non-negative but are not required to sum to 100:
    callers may under- or over-allocate on purpose, and each category simply
    receives its own share.
    """

    debt_pct: float = 0.0
    savings_pct: float = 0.0
    investing_pct: float = 0.0


@dataclass(frozen=True)
class StrategyConfig:
    horizon_months: int
    extra_monthly_amount: float
    allocation: Allocation


@dataclass(frozen=True)
class GrowthRates:
    """Nominal monthly growth rate per asset category (0.005 = 0.5% per month)"""

    checking: float = 0.0
    savings: float = 0.0
    investment: float = 0.0


@dataclass(frozen=True)
class CategoryBalances:
    """Starting balance per category; debt as a positive magnitude"""

    checking: float = 0.0
    savings: float = 0.0
    investment: float = 0.0
    debt: float = 0.0


@dataclass(frozen=True)
class ProjectionPoint:
    """One month of a generated net-worth trajectory"""

    month: int
    checking_balance: float
    savings_balance: float
    investment_balance: float
    debt_balance: float
    net_worth: float
    is_milestone: bool = False

    @property
    def total_assets(self) -> float:
        return self.checking_balance + self.savings_balance + self.investment_balance


@dataclass(frozen=True)
class DebtPayoffResult:
    """Output of the amortization calculator"""

    months_to_payoff: int
    total_paid: float
    total_interest: float
    monthly_payment: float
    payoff_date: date
    interest_savings: Optional[float] = None  # vs. paying only the supplied minimum


@dataclass(frozen=True)
class YearlySnapshot:
    year: int
    value: float


@dataclass(frozen=True)
class GrowthResult:
    """Output of the compound growth projector"""

    final_value: float
    total_contributed: float
    growth: float
    monthly_rate: float
    annual_return_percent: float
    projected_value_by_year: List[YearlySnapshot] = field(default_factory=list)


@dataclass(frozen=True)
class EmergencyFundResult:
    target_amount: float
    remaining_amount: float
    months_to_complete: int
    is_complete: bool
    recommended_monthly_contribution: float


@dataclass(frozen=True)
class DebtPayoffStep:
    """One debt within a payoff ordering, with the cascaded payment applied to it"""

    account: Account
    minimum_payment: float
    monthly_payment: float
    months_to_payoff: int
    total_interest: float


@dataclass(frozen=True)
class StrategyPlan:
    name: str
    steps: Tuple[DebtPayoffStep, ...]
    total_interest: float

    @property
    def payoff_order(self) -> List[Account]:
        return [step.account for step in self.steps]


@dataclass(frozen=True)
class DebtStrategyComparison:
    """Snowball vs avalanche outcome; savings is reported regardless of recommendation"""

    snowball: StrategyPlan
    avalanche: StrategyPlan
    recommendation: str  # "snowball" or "avalanche"
    savings: float


@dataclass(frozen=True)
class NetWorthSummary:
    total_assets: float
    total_debt: float
    net_worth: float
    health_score: int  # 0-100


@dataclass(frozen=True)
class GoalProgress:
    progress_percentage: float
    months_remaining: int
    recommended_monthly_contribution: float
    current_monthly_contribution: float
    is_on_track: bool
    acceleration_needed: float
