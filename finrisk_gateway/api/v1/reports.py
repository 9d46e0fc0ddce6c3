"""Aggregate views for charts and the reports page"""

from dataclasses import asdict
from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from starlette.responses import Response

from finrisk_gateway.api.dependencies import get_finance_service
from finrisk_gateway.api.v1.schemas import (
    CategoryBreakdownSchema,
    CategoryTrendRow,
    InsightsResponse,
    MonthlySummarySchema,
)
from finrisk_gateway.services.finance import FinanceService

router = APIRouter()


@router.get("/monthly-summary", response_model=List[MonthlySummarySchema])
def get_monthly_summary(service: FinanceService = Depends(get_finance_service)):
    """Income, expense and savings per month, oldest first"""
    return [MonthlySummarySchema(**asdict(row)) for row in service.monthly_summary()]


@router.get("/category-trends", response_model=List[CategoryTrendRow])
def get_category_trends(service: FinanceService = Depends(get_finance_service)):
    """
    Expense per category per month, oldest first.

    Categories without spend in a month are absent from that row; chart
    consumers treat them as zero.
    """
    return [
        {"name": trend.name, **{category.value: amount for category, amount in trend.categories.items()}}
        for trend in service.category_trend()
    ]


@router.get("/category-breakdown", response_model=List[CategoryBreakdownSchema])
def get_category_breakdown(service: FinanceService = Depends(get_finance_service)):
    """Whole-ledger expense per category, largest first"""
    return [CategoryBreakdownSchema(**asdict(item)) for item in service.category_breakdown()]


@router.get("/category-breakdown.csv")
def export_category_breakdown(service: FinanceService = Depends(get_finance_service)):
    """Download the category breakdown as CSV"""
    filename = f"financial_report_{date.today().isoformat()}.csv"
    return Response(
        content=service.export_breakdown_csv(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/insights", response_model=InsightsResponse)
def get_insights(service: FinanceService = Depends(get_finance_service)):
    """Top category, largest expense and average monthly spend"""
    return InsightsResponse(**asdict(service.spending_insights()))
