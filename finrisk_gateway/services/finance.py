"""Finance service - the operations the API (or any other caller) drives"""

import logging
import math
from datetime import date
from typing import Callable, List, Optional

from finrisk_gateway.domain.aggregation import category_trend, monthly_summary
from finrisk_gateway.domain.exceptions import InvalidTransactionDataError
from finrisk_gateway.domain.insights import breakdown_to_csv, category_breakdown, spending_insights
from finrisk_gateway.domain.models import (
    CategoryBreakdownItem,
    CategoryTrend,
    FinancialHealthReport,
    MonthlySummary,
    SpendingInsights,
    Transaction,
)
from finrisk_gateway.domain.reporting import DEFAULT_WINDOW_DAYS, generate_report
from finrisk_gateway.infrastructure.store.repositories import TransactionRepository

logger = logging.getLogger(__name__)


class FinanceService:
    """
    Facade over a transaction store and the pure analysis functions.

    Every read works on a fresh snapshot from the store; nothing here keeps
    state between calls.
    """

    def __init__(
        self,
        repository: TransactionRepository,
        clock: Callable[[], date] = date.today,
        window_days: int = DEFAULT_WINDOW_DAYS,
        currency_symbol: str = "₹",
    ):
        self.repository = repository
        self.clock = clock
        self.window_days = window_days
        self.currency_symbol = currency_symbol

    def list_transactions(self) -> List[Transaction]:
        """All transactions, newest first"""
        return self.repository.find_all()

    def record_transaction(self, transaction: Transaction) -> Transaction:
        """
        Append a transaction.

        Raises:
            InvalidTransactionDataError: amount is negative or not finite
        """
        if not math.isfinite(transaction.amount) or transaction.amount < 0:
            raise InvalidTransactionDataError(
                f"Transaction amount must be a finite non-negative number, got {transaction.amount}"
            )

        saved = self.repository.save(transaction)
        logger.info(
            "Transaction recorded",
            extra={"transaction_id": saved.id, "type": saved.type.value, "category": saved.category.value},
        )
        return saved

    def analyze_health(self, liquid_cash: float, as_of: Optional[date] = None) -> FinancialHealthReport:
        """Health report over the trailing window ending at `as_of` (default: today)"""
        return generate_report(
            self.repository.find_all(),
            liquid_cash,
            as_of or self.clock(),
            window_days=self.window_days,
            currency_symbol=self.currency_symbol,
        )

    def monthly_summary(self) -> List[MonthlySummary]:
        return monthly_summary(self.repository.find_all())

    def category_trend(self) -> List[CategoryTrend]:
        return category_trend(self.repository.find_all())

    def category_breakdown(self) -> List[CategoryBreakdownItem]:
        return category_breakdown(self.repository.find_all())

    def spending_insights(self) -> SpendingInsights:
        return spending_insights(self.repository.find_all())

    def export_breakdown_csv(self) -> str:
        return breakdown_to_csv(self.category_breakdown())

    def reset_store(self) -> None:
        """Clear the store and reseed it"""
        self.repository.reset()
        logger.info("Store reset")
