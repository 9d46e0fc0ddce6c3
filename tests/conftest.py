"""Pytest fixtures for testing"""

import itertools
from datetime import date, timedelta
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from finrisk_gateway.api.main import create_app
from finrisk_gateway.domain.models import Category, Transaction, TransactionType
from finrisk_gateway.infrastructure.store.repositories import InMemoryTransactionRepository
from finrisk_gateway.services.finance import FinanceService

AS_OF = date(2024, 6, 15)


@pytest.fixture
def as_of() -> date:
    """Fixed reference date so windows never depend on the real clock"""
    return AS_OF


@pytest.fixture
def make_txn() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults"""
    counter = itertools.count(1)

    def _make(
        amount: float,
        day: date = AS_OF,
        type: TransactionType = TransactionType.EXPENSE,
        category: Category = Category.OTHER,
        description: str = "Test",
    ) -> Transaction:
        return Transaction(
            id=f"txn_{next(counter)}",
            amount=amount,
            date=day,
            description=description,
            type=type,
            category=category,
        )

    return _make


@pytest.fixture
def scenario_a_transactions(make_txn) -> list[Transaction]:
    """Salary 5200 against rent 2100, food 300, entertainment 400 in the last month"""
    return [
        make_txn(5200, AS_OF - timedelta(days=1), TransactionType.INCOME, Category.SALARY, "Monthly Salary"),
        make_txn(2100, AS_OF - timedelta(days=3), category=Category.HOUSING, description="Apartment Rent"),
        make_txn(300, AS_OF - timedelta(days=5), category=Category.FOOD, description="Grocery Store"),
        make_txn(400, AS_OF - timedelta(days=8), category=Category.ENTERTAINMENT, description="Streaming & Dining"),
    ]


@pytest.fixture
def service(as_of: date) -> FinanceService:
    """Service over an empty, unseeded store with a frozen clock"""
    return FinanceService(InMemoryTransactionRepository(), clock=lambda: as_of)


@pytest.fixture
def client(service: FinanceService) -> TestClient:
    """Create FastAPI test client bound to the test service"""
    app = create_app(service=service)
    return TestClient(app)
