"""Demo ledger generator used to seed and reseed the in-memory store"""

import random
import uuid
from datetime import date, timedelta
from typing import List

from finrisk_gateway.domain.models import Category, Transaction, TransactionType


def generate_seed_transactions(today: date, days: int = 90, seed: int | None = None) -> List[Transaction]:
    """
    Generate `days` days of history ending at `today`.

    Pattern (by day offset i, counting back from today):
    - i % 30 == 0: salary 5200
    - i % 30 == 2: rent 2100
    - i % 4 == 0:  grocery 80-180
    - i % 7 == 0:  streaming & dining 40-100

    The same `seed` and `today` always give the same amounts and ids.
    """
    rng = random.Random(seed)
    transactions = []

    def add(day: date, amount: float, description: str, txn_type: TransactionType, category: Category, recurring: bool):
        transactions.append(
            Transaction(
                id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                amount=amount,
                date=day,
                description=description,
                type=txn_type,
                category=category,
                is_recurring=recurring,
            )
        )

    for i in range(days):
        day = today - timedelta(days=i)

        if i % 30 == 0:
            add(day, 5200.0, "Monthly Salary", TransactionType.INCOME, Category.SALARY, True)

        if i % 30 == 2:
            add(day, 2100.0, "Apartment Rent", TransactionType.EXPENSE, Category.HOUSING, True)

        if i % 4 == 0:
            add(day, 80 + rng.random() * 100, "Grocery Store", TransactionType.EXPENSE, Category.FOOD, False)

        if i % 7 == 0:
            add(day, 40 + rng.random() * 60, "Streaming & Dining", TransactionType.EXPENSE, Category.ENTERTAINMENT, False)

    return transactions
