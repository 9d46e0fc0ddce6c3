"""Month and category bucketing of a transaction snapshot for charting"""

import math
from collections import defaultdict
from typing import Dict, Iterable, List

from finrisk_gateway.domain.models import (
    Category,
    CategoryTrend,
    MonthlySummary,
    Transaction,
    TransactionType,
)
from finrisk_gateway.utils.date_utils import MonthKey, format_month_key, month_key


def monthly_summary(transactions: Iterable[Transaction]) -> List[MonthlySummary]:
    """
    Income, expense and savings per calendar month.

    Only months that hold at least one transaction appear (sparse), ascending
    by (year, month). Amounts are summed with math.fsum, so any permutation of
    the same transactions gives identical rows.
    """
    income_by_month: Dict[MonthKey, List[float]] = defaultdict(list)
    expense_by_month: Dict[MonthKey, List[float]] = defaultdict(list)
    months = set()

    for txn in transactions:
        key = month_key(txn.date)
        months.add(key)
        if txn.type == TransactionType.INCOME:
            income_by_month[key].append(txn.amount)
        else:
            expense_by_month[key].append(txn.amount)

    summaries = []
    for key in sorted(months):
        income = math.fsum(income_by_month.get(key, []))
        expense = math.fsum(expense_by_month.get(key, []))
        summaries.append(
            MonthlySummary(
                month=format_month_key(key),
                income=income,
                expense=expense,
                savings=income - expense,
            )
        )

    return summaries


def category_trend(transactions: Iterable[Transaction]) -> List[CategoryTrend]:
    """
    Expense totals per category per calendar month.

    Income is ignored; a month without expenses is omitted, and a category
    without expenses in a month is left out of that month's mapping rather
    than zero-filled. Categories are listed in declaration order.
    """
    amounts: Dict[MonthKey, Dict[Category, List[float]]] = defaultdict(lambda: defaultdict(list))

    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        amounts[month_key(txn.date)][txn.category].append(txn.amount)

    trends = []
    for key in sorted(amounts):
        by_category = amounts[key]
        trends.append(
            CategoryTrend(
                name=format_month_key(key),
                categories={
                    category: math.fsum(by_category[category])
                    for category in Category
                    if category in by_category
                },
            )
        )

    return trends
