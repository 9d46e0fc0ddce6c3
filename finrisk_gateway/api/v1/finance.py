"""Ledger and health report endpoints under /v1/finance"""

import logging
import time
import uuid
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from finrisk_gateway.api.dependencies import get_finance_service, get_request_id
from finrisk_gateway.api.v1.schemas import HealthReportResponse, TransactionCreate, TransactionSchema
from finrisk_gateway.config import settings
from finrisk_gateway.domain.exceptions import InvalidTransactionDataError
from finrisk_gateway.domain.models import Transaction
from finrisk_gateway.infrastructure.observability.logging import log_report
from finrisk_gateway.infrastructure.observability.metrics import (
    record_report,
    store_reset_counter,
    transaction_counter,
)
from finrisk_gateway.services.finance import FinanceService

router = APIRouter()


@router.get("/summary", response_model=HealthReportResponse)
def get_health_analysis(
    request: Request,
    liquid_cash: float = Query(settings.default_liquid_cash, allow_inf_nan=False, description="Current liquid cash"),
    as_of: Optional[date] = Query(None, description="Window end date (default: today)"),
    service: FinanceService = Depends(get_finance_service),
):
    """
    Score the trailing window of the ledger.

    Flow:
    1. Snapshot the store
    2. Sum income and expense dated on or after as_of - window
    3. Run the risk rules against those sums and liquid_cash
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        report = service.analyze_health(liquid_cash, as_of=as_of)

        risk_codes = [factor.code for factor in report.risk_factors]
        duration_ms = (time.time() - start_time) * 1000
        record_report(report.status.value, risk_codes)
        log_report(request_id, report.overall_score, report.status.value, risk_codes, duration_ms)

        return HealthReportResponse(**asdict(report))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/transaction", response_model=TransactionSchema)
def record_transaction(
    request_body: TransactionCreate,
    request: Request,
    service: FinanceService = Depends(get_finance_service),
):
    """Append a transaction to the ledger"""
    transaction = Transaction(
        id=request_body.id or str(uuid.uuid4()),
        amount=request_body.amount,
        date=request_body.date,
        description=request_body.description,
        type=request_body.type,
        category=request_body.category,
        is_recurring=request_body.is_recurring,
    )

    try:
        saved = service.record_transaction(transaction)
    except InvalidTransactionDataError as e:
        logging.warning(f"Invalid transaction: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    transaction_counter.labels(type=saved.type.value).inc()
    return TransactionSchema(**asdict(saved))


@router.get("/history", response_model=List[TransactionSchema])
def get_history(service: FinanceService = Depends(get_finance_service)):
    """All transactions, newest first"""
    return [TransactionSchema(**asdict(t)) for t in service.list_transactions()]


@router.post("/reset")
def reset_store(request: Request, service: FinanceService = Depends(get_finance_service)):
    """Clear the ledger and reseed it with demo data"""
    service.reset_store()
    store_reset_counter.inc()
    logging.info("Store reset requested", extra={"request_id": get_request_id(request)})
    return {"status": "reset", "transaction_count": len(service.list_transactions())}
