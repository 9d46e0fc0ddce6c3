"""Risk engine - deterministic rule-based financial health assessment"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from finrisk_gateway.domain.models import FinancialHealthReport, RiskFactor, RiskLevel
from finrisk_gateway.utils.formatting import format_fixed

STARTING_SCORE = 100

# Stand-in for expense/income when income is zero: undefined ratio counts as maximal risk
UNDEFINED_EXPENSE_RATIO = 100.0

LOW_SAVINGS_RATE = 0.10
CRITICAL_RUNWAY_MONTHS = 3.0
TARGET_RUNWAY_MONTHS = 6.0
HIGH_EXPENSE_RATIO = 0.80


@dataclass(frozen=True)
class HealthMetrics:
    """Derived quantities every rule reads from"""

    income: float
    expense: float
    liquid_cash: float
    burn_rate: float
    savings: float
    savings_rate: float
    expense_ratio: float
    runway_months: float
    currency_symbol: str = "₹"


def compute_metrics(
    monthly_income: float,
    monthly_expense: float,
    liquid_cash: float,
    currency_symbol: str = "₹",
) -> HealthMetrics:
    """
    Derive burn rate, savings, ratios and runway from the three inputs.

    Division by zero never happens:
    - income == 0: savings rate is 0 and the expense ratio is UNDEFINED_EXPENSE_RATIO
    - expense == 0: runway is 0 months (not infinite)
    """
    burn_rate = monthly_expense
    savings = monthly_income - monthly_expense
    savings_rate = savings / monthly_income if monthly_income > 0 else 0.0
    expense_ratio = monthly_expense / monthly_income if monthly_income > 0 else UNDEFINED_EXPENSE_RATIO
    runway_months = liquid_cash / burn_rate if burn_rate > 0 else 0.0

    return HealthMetrics(
        income=monthly_income,
        expense=monthly_expense,
        liquid_cash=liquid_cash,
        burn_rate=burn_rate,
        savings=savings,
        savings_rate=savings_rate,
        expense_ratio=expense_ratio,
        runway_months=runway_months,
        currency_symbol=currency_symbol,
    )


@dataclass(frozen=True)
class Rule:
    """
    One entry of the rule table.

    Rules sharing an `exclusive_group` behave like an if/elif chain: once one of
    them fires, later rules of the same group are skipped.
    """

    code: str
    title: str
    penalty: int
    severity: RiskLevel
    applies: Callable[[HealthMetrics], bool]
    describe: Callable[[HealthMetrics], str]
    recommendation: str
    exclusive_group: Optional[str] = None

    def to_factor(self, metrics: HealthMetrics) -> RiskFactor:
        return RiskFactor(
            code=self.code,
            title=self.title,
            description=self.describe(metrics),
            severity=self.severity,
            recommendation=self.recommendation,
        )


def _describe_deficit(m: HealthMetrics) -> str:
    deficit = format_fixed(abs(m.savings), 0)
    return f"You are spending {m.currency_symbol}{deficit} more than you earn monthly."


def _describe_savings_rate(m: HealthMetrics) -> str:
    return f"Current savings rate is {format_fixed(m.savings_rate * 100, 1)}%. Recommended is 20%+."


def _describe_low_runway(m: HealthMetrics) -> str:
    return f"Current cash provides only {format_fixed(m.runway_months, 1)} months of runway."


def _describe_moderate_runway(m: HealthMetrics) -> str:
    return f"Runway is healthy ({format_fixed(m.runway_months, 1)} months) but could be stronger."


def _describe_expense_ratio(m: HealthMetrics) -> str:
    return f"Expenses consume {format_fixed(m.expense_ratio * 100, 0)}% of income."


# Evaluation order is the order of risk factors in the report
RULES: List[Rule] = [
    Rule(
        code="SOLVENCY_RISK",
        title="Negative Cash Flow Detected",
        penalty=40,
        severity=RiskLevel.CRITICAL,
        applies=lambda m: m.savings < 0,
        describe=_describe_deficit,
        recommendation="Immediate budget freeze required. Audit variable expenses.",
    ),
    Rule(
        code="LOW_SAVINGS",
        title="Low Savings Rate",
        penalty=20,
        severity=RiskLevel.WARNING,
        applies=lambda m: m.savings_rate < LOW_SAVINGS_RATE and m.savings >= 0,
        describe=_describe_savings_rate,
        recommendation="Target reducing Housing or Transport costs to boost savings.",
    ),
    Rule(
        code="LOW_RUNWAY",
        title="Fragile Emergency Fund",
        penalty=25,
        severity=RiskLevel.CRITICAL,
        applies=lambda m: m.runway_months < CRITICAL_RUNWAY_MONTHS,
        describe=_describe_low_runway,
        recommendation="Prioritize building liquid cash reserves to cover at least 3 months of expenses.",
        exclusive_group="runway",
    ),
    Rule(
        code="MODERATE_RUNWAY",
        title="Building Resilience",
        penalty=10,
        severity=RiskLevel.SAFE,  # informational
        applies=lambda m: m.runway_months < TARGET_RUNWAY_MONTHS,
        describe=_describe_moderate_runway,
        recommendation="Continue saving to reach the 6-month safety net.",
        exclusive_group="runway",
    ),
    Rule(
        code="HIGH_FIXED_COST",
        title="High Expense Ratio",
        penalty=15,
        severity=RiskLevel.WARNING,
        applies=lambda m: m.expense_ratio > HIGH_EXPENSE_RATIO,
        describe=_describe_expense_ratio,
        recommendation="Review recurring subscriptions and housing costs.",
    ),
]


def resolve_status(score: int) -> RiskLevel:
    """
    Map a clamped score to a status band.

    Bands:
    - 0 - 59:   CRITICAL
    - 60 - 79:  WARNING
    - 80 - 100: SAFE
    """
    if score < 60:
        return RiskLevel.CRITICAL
    elif score < 80:
        return RiskLevel.WARNING
    else:
        return RiskLevel.SAFE


def evaluate_rules(metrics: HealthMetrics, rules: List[Rule] = RULES) -> tuple[int, List[RiskFactor]]:
    """
    Run the rule table in order.

    Returns: (total_penalty, risk_factors)
    """
    total_penalty = 0
    factors: List[RiskFactor] = []
    fired_groups = set()

    for rule in rules:
        if rule.exclusive_group is not None and rule.exclusive_group in fired_groups:
            continue
        if not rule.applies(metrics):
            continue

        total_penalty += rule.penalty
        factors.append(rule.to_factor(metrics))
        if rule.exclusive_group is not None:
            fired_groups.add(rule.exclusive_group)

    return total_penalty, factors


def analyze(
    monthly_income: float,
    monthly_expense: float,
    liquid_cash: float,
    currency_symbol: str = "₹",
) -> FinancialHealthReport:
    """
    Main entry point: score trailing-month income, expense and liquid cash.

    Pure and total: the same inputs always give an equal report, and no input in
    the numeric domain (negative cash included) raises.
    """
    metrics = compute_metrics(monthly_income, monthly_expense, liquid_cash, currency_symbol)
    total_penalty, factors = evaluate_rules(metrics)

    score = max(0, STARTING_SCORE - total_penalty)

    return FinancialHealthReport(
        overall_score=score,
        status=resolve_status(score),
        monthly_burn_rate=metrics.burn_rate,
        projected_runway_months=metrics.runway_months,
        savings_rate=metrics.savings_rate,
        expense_to_income_ratio=metrics.expense_ratio,
        risk_factors=factors,
    )
