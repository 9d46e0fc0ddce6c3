"""Unit tests for the in-memory store and demo seed data"""

from datetime import date, timedelta

from finrisk_gateway.domain.models import Category, TransactionType
from finrisk_gateway.infrastructure.store.repositories import InMemoryTransactionRepository
from finrisk_gateway.infrastructure.store.seed import generate_seed_transactions


def test_generate_seed_transactions_pattern(as_of):
    transactions = generate_seed_transactions(as_of, days=90, seed=1)

    salaries = [t for t in transactions if t.category == Category.SALARY]
    rents = [t for t in transactions if t.category == Category.HOUSING]
    groceries = [t for t in transactions if t.category == Category.FOOD]
    dining = [t for t in transactions if t.category == Category.ENTERTAINMENT]

    assert [t.date for t in salaries] == [as_of - timedelta(days=d) for d in (0, 30, 60)]
    assert all(t.amount == 5200 and t.type == TransactionType.INCOME and t.is_recurring for t in salaries)
    assert [t.date for t in rents] == [as_of - timedelta(days=d) for d in (2, 32, 62)]
    assert all(t.amount == 2100 and t.type == TransactionType.EXPENSE for t in rents)
    assert len(groceries) == 23
    assert all(80 <= t.amount < 180 for t in groceries)
    assert len(dining) == 13
    assert all(40 <= t.amount < 100 for t in dining)
    assert len({t.id for t in transactions}) == len(transactions)


def test_generate_seed_transactions_is_reproducible(as_of):
    assert generate_seed_transactions(as_of, seed=42) == generate_seed_transactions(as_of, seed=42)
    assert generate_seed_transactions(as_of, seed=42) != generate_seed_transactions(as_of, seed=43)


def test_find_all_returns_newest_first(make_txn):
    repo = InMemoryTransactionRepository()
    older = repo.save(make_txn(10, date(2024, 1, 1)))
    newest = repo.save(make_txn(20, date(2024, 3, 1)))
    same_day_first = repo.save(make_txn(30, date(2024, 2, 1)))
    same_day_second = repo.save(make_txn(40, date(2024, 2, 1)))

    assert repo.find_all() == [newest, same_day_first, same_day_second, older]


def test_find_all_returns_a_snapshot(make_txn):
    repo = InMemoryTransactionRepository()
    repo.save(make_txn(10))

    snapshot = repo.find_all()
    repo.save(make_txn(20))

    assert len(snapshot) == 1
    assert len(repo.find_all()) == 2


def test_reset_clears_and_reseeds(make_txn, as_of):
    repo = InMemoryTransactionRepository(seeder=lambda: generate_seed_transactions(as_of, days=10, seed=3))
    seeded = repo.find_all()
    repo.save(make_txn(999))

    repo.reset()

    assert repo.find_all() == seeded


def test_reset_without_seeder_empties_store(make_txn):
    repo = InMemoryTransactionRepository()
    repo.save(make_txn(10))

    repo.reset()

    assert repo.find_all() == []
