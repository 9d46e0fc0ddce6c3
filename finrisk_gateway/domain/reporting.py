"""Report orchestration - trailing window summation feeding the risk engine"""

import math
from datetime import date
from typing import Iterable, List, Tuple

from finrisk_gateway.domain.models import FinancialHealthReport, Transaction, TransactionType
from finrisk_gateway.domain.risk_engine import analyze
from finrisk_gateway.utils.date_utils import window_start

DEFAULT_WINDOW_DAYS = 30


def select_window(transactions: Iterable[Transaction], as_of: date, days: int = DEFAULT_WINDOW_DAYS) -> List[Transaction]:
    """Transactions dated on or after `as_of - days` (no upper bound)"""
    start = window_start(as_of, days)
    return [t for t in transactions if t.date >= start]


def sum_income_expense(transactions: Iterable[Transaction]) -> Tuple[float, float]:
    """Returns: (total_income, total_expense)"""
    income = []
    expense = []
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income.append(txn.amount)
        else:
            expense.append(txn.amount)
    return math.fsum(income), math.fsum(expense)


def generate_report(
    transactions: Iterable[Transaction],
    liquid_cash: float,
    as_of: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    currency_symbol: str = "₹",
) -> FinancialHealthReport:
    """
    Score the trailing window of a transaction snapshot.

    Holds no rule knowledge: windowing and summation only, then delegation to
    the risk engine. Same inputs always give an equal report.
    """
    recent = select_window(transactions, as_of, window_days)
    income, expense = sum_income_expense(recent)
    return analyze(income, expense, liquid_cash, currency_symbol=currency_symbol)
