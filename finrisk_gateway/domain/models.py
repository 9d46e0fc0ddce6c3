"""Domain models - pure Python dataclasses representing ledger and report entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Category(str, Enum):
    """Closed set of ledger categories (declaration order is the display order)"""

    HOUSING = "Housing"
    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    ENTERTAINMENT = "Entertainment"
    SALARY = "Salary"
    INVESTMENT = "Investment"
    OTHER = "Other"


class RiskLevel(str, Enum):
    SAFE = "SAFE"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Transaction:
    """Dated income or expense record; the sign lives in `type`, never in `amount`"""

    id: str
    amount: float
    date: date
    description: str
    type: TransactionType
    category: Category
    is_recurring: bool = False


@dataclass(frozen=True)
class RiskFactor:
    """One triggered rule with its explanation and remediation"""

    code: str
    title: str
    description: str
    severity: RiskLevel
    recommendation: str


@dataclass(frozen=True)
class FinancialHealthReport:
    """Output of the risk engine"""

    overall_score: int
    status: RiskLevel
    monthly_burn_rate: float
    projected_runway_months: float
    savings_rate: float
    expense_to_income_ratio: float
    risk_factors: List[RiskFactor] = field(default_factory=list)


@dataclass
class MonthlySummary:
    month: str  # YYYY-MM
    income: float
    expense: float
    savings: float


@dataclass
class CategoryTrend:
    """Expense totals per category for one month; absent categories mean zero"""

    name: str  # YYYY-MM
    categories: Dict[Category, float] = field(default_factory=dict)


@dataclass
class CategoryBreakdownItem:
    category: Category
    amount: float
    share_percent: float


@dataclass
class SpendingInsights:
    top_category: str
    top_category_amount: float
    largest_expense_description: str
    largest_expense_amount: float
    avg_monthly_spend: float
