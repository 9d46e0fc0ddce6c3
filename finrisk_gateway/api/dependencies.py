"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from finrisk_gateway.services.finance import FinanceService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_finance_service(request: Request) -> FinanceService:
    """Provide the finance service wired into this application instance"""
    return request.app.state.finance_service
