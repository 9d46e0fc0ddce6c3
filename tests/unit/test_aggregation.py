"""Unit tests for month and category bucketing"""

import random
from datetime import date

from finrisk_gateway.domain.aggregation import category_trend, monthly_summary
from finrisk_gateway.domain.models import Category, TransactionType


def test_monthly_summary_buckets_and_orders_months(make_txn):
    transactions = [
        make_txn(300, date(2024, 3, 10), category=Category.FOOD),
        make_txn(5200, date(2024, 1, 31), TransactionType.INCOME, Category.SALARY),
        make_txn(2100, date(2024, 1, 2), category=Category.HOUSING),
        make_txn(1000, date(2024, 3, 1), TransactionType.INCOME, Category.INVESTMENT),
    ]

    summaries = monthly_summary(transactions)

    # February has no transactions and is not zero-filled
    assert [s.month for s in summaries] == ["2024-01", "2024-03"]
    january, march = summaries
    assert (january.income, january.expense, january.savings) == (5200, 2100, 3100)
    assert (march.income, march.expense, march.savings) == (1000, 300, 700)


def test_monthly_summary_orders_across_years(make_txn):
    transactions = [
        make_txn(10, date(2024, 1, 5)),
        make_txn(10, date(2023, 12, 31)),
        make_txn(10, date(2023, 9, 1)),
    ]

    assert [s.month for s in monthly_summary(transactions)] == ["2023-09", "2023-12", "2024-01"]


def test_monthly_summary_empty():
    assert monthly_summary([]) == []


def test_monthly_summary_negative_savings(make_txn):
    summaries = monthly_summary([make_txn(80.5, date(2024, 5, 20))])

    assert summaries[0].income == 0
    assert summaries[0].savings == -80.5


def test_category_trend_ignores_income_and_skips_empty_months(make_txn):
    transactions = [
        make_txn(5200, date(2024, 4, 30), TransactionType.INCOME, Category.SALARY),
        make_txn(2100, date(2024, 5, 2), category=Category.HOUSING),
        make_txn(120, date(2024, 5, 9), category=Category.FOOD),
        make_txn(95.5, date(2024, 5, 21), category=Category.FOOD),
        make_txn(60, date(2024, 6, 1), category=Category.ENTERTAINMENT),
    ]

    trends = category_trend(transactions)

    assert [t.name for t in trends] == ["2024-05", "2024-06"]
    assert trends[0].categories == {Category.HOUSING: 2100, Category.FOOD: 215.5}
    # Categories without spend are absent, not zero
    assert trends[1].categories == {Category.ENTERTAINMENT: 60}
    assert Category.SALARY not in trends[0].categories


def test_category_trend_lists_categories_in_declaration_order(make_txn):
    transactions = [
        make_txn(10, date(2024, 5, 1), category=Category.OTHER),
        make_txn(10, date(2024, 5, 2), category=Category.FOOD),
        make_txn(10, date(2024, 5, 3), category=Category.HOUSING),
    ]

    assert list(category_trend(transactions)[0].categories) == [Category.HOUSING, Category.FOOD, Category.OTHER]


def test_aggregation_is_independent_of_input_order(make_txn):
    rng = random.Random(7)
    transactions = [
        make_txn(
            round(rng.uniform(0.01, 500), 2),
            date(2024, rng.randint(1, 6), rng.randint(1, 28)),
            rng.choice(list(TransactionType)),
            rng.choice(list(Category)),
        )
        for _ in range(200)
    ]
    shuffled = transactions[:]
    rng.shuffle(shuffled)

    assert monthly_summary(shuffled) == monthly_summary(transactions)
    assert category_trend(shuffled) == category_trend(transactions)
    assert [list(t.categories) for t in category_trend(shuffled)] == [
        list(t.categories) for t in category_trend(transactions)
    ]
