"""Whole-ledger expense breakdown, headline insights and CSV export"""

import csv
import io
import math
from collections import defaultdict
from typing import Dict, Iterable, List

from finrisk_gateway.domain.aggregation import category_trend
from finrisk_gateway.domain.models import (
    Category,
    CategoryBreakdownItem,
    SpendingInsights,
    Transaction,
    TransactionType,
)
from finrisk_gateway.utils.formatting import format_fixed

CSV_HEADERS = ["Category", "Amount", "% of Total"]


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryBreakdownItem]:
    """
    Total expense per category with its share of all expenses.

    Sorted by amount descending; ties keep category declaration order.
    """
    amounts: Dict[Category, List[float]] = defaultdict(list)
    for txn in transactions:
        if txn.type == TransactionType.EXPENSE:
            amounts[txn.category].append(txn.amount)

    totals = {category: math.fsum(amounts[category]) for category in Category if category in amounts}
    grand_total = math.fsum(totals.values())

    items = [
        CategoryBreakdownItem(
            category=category,
            amount=amount,
            share_percent=(amount / grand_total * 100) if grand_total > 0 else 0.0,
        )
        for category, amount in totals.items()
    ]
    # sorted() is stable, so equal amounts stay in declaration order
    return sorted(items, key=lambda item: item.amount, reverse=True)


def spending_insights(transactions: Iterable[Transaction]) -> SpendingInsights:
    """
    Headline numbers for the reports page.

    - top category: largest entry of the breakdown ("N/A" when there are no expenses)
    - largest expense: first expense with the maximum amount ("None" when absent)
    - average monthly spend: total expense / months present in the category trend
    """
    transactions = list(transactions)
    breakdown = category_breakdown(transactions)
    expenses = [t for t in transactions if t.type == TransactionType.EXPENSE]

    largest_description, largest_amount = "None", 0.0
    for txn in expenses:
        if txn.amount > largest_amount:
            largest_description, largest_amount = txn.description, txn.amount

    months = len(category_trend(transactions))
    total = math.fsum(t.amount for t in expenses)

    return SpendingInsights(
        top_category=breakdown[0].category.value if breakdown else "N/A",
        top_category_amount=breakdown[0].amount if breakdown else 0.0,
        largest_expense_description=largest_description,
        largest_expense_amount=largest_amount,
        avg_monthly_spend=total / months if months else 0.0,
    )


def breakdown_to_csv(breakdown: List[CategoryBreakdownItem]) -> str:
    """Render a breakdown as CSV: amounts with two decimals, shares with one"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    has_total = math.fsum(item.amount for item in breakdown) > 0
    for item in breakdown:
        share = f"{format_fixed(item.share_percent, 1)}%" if has_total else "0%"
        writer.writerow([item.category.value, format_fixed(item.amount, 2), share])

    return buffer.getvalue()
