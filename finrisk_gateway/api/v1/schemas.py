"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from finrisk_gateway.domain.models import Category, RiskLevel, TransactionType


class TransactionCreate(BaseModel):
    """Request body for POST /v1/finance/transaction"""

    id: Optional[str] = Field(None, min_length=1, description="Client-supplied id; generated when omitted")
    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Non-negative amount; sign comes from type")
    date: date
    description: str = ""
    type: TransactionType
    category: Category
    is_recurring: bool = False


class TransactionSchema(BaseModel):
    """Single ledger transaction"""

    id: str
    amount: float
    date: date
    description: str
    type: TransactionType
    category: Category
    is_recurring: bool


class RiskFactorSchema(BaseModel):
    code: str
    title: str
    description: str
    severity: RiskLevel
    recommendation: str


class HealthReportResponse(BaseModel):
    """Response for GET /v1/finance/summary"""

    overall_score: int = Field(..., ge=0, le=100)
    status: RiskLevel
    monthly_burn_rate: float
    projected_runway_months: float
    savings_rate: float
    expense_to_income_ratio: float
    risk_factors: List[RiskFactorSchema]


class MonthlySummarySchema(BaseModel):
    month: str
    income: float
    expense: float
    savings: float


# One row per month: {"name": "2024-05", "Housing": 2100.0, "Food": 412.5, ...}
CategoryTrendRow = Dict[str, Union[str, float]]


class CategoryBreakdownSchema(BaseModel):
    category: Category
    amount: float
    share_percent: float


class InsightsResponse(BaseModel):
    """Response for GET /v1/finance/insights"""

    top_category: str
    top_category_amount: float
    largest_expense_description: str
    largest_expense_amount: float
    avg_monthly_spend: float
