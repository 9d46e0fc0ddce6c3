"""Data access layer for ledger transactions"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List

from finrisk_gateway.domain.models import Transaction

logger = logging.getLogger(__name__)

Seeder = Callable[[], List[Transaction]]


class TransactionRepository(ABC):
    """Append-only transaction store with full-scan reads"""

    @abstractmethod
    def find_all(self) -> List[Transaction]:
        """Snapshot of every transaction, newest date first"""

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """Append a transaction and return it"""

    @abstractmethod
    def reset(self) -> None:
        """Drop every transaction and reseed"""


class InMemoryTransactionRepository(TransactionRepository):
    """
    Volatile list-backed store.

    Contents are lost on restart. `find_all` returns a new list each call, so
    callers can analyze it while others keep appending.
    """

    def __init__(self, seeder: Seeder | None = None):
        self._seeder = seeder
        self._transactions: List[Transaction] = []
        self._seed()

    def _seed(self) -> None:
        if self._seeder is None:
            return
        seeded = self._seeder()
        self._transactions.extend(seeded)
        logger.info("Store seeded", extra={"transaction_count": len(seeded)})

    def find_all(self) -> List[Transaction]:
        # Stable sort: same-day transactions keep insertion order
        return sorted(self._transactions, key=lambda t: t.date, reverse=True)

    def save(self, transaction: Transaction) -> Transaction:
        self._transactions.append(transaction)
        return transaction

    def reset(self) -> None:
        self._transactions = []
        self._seed()
