"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from fee_gateway.domain.models import FeeStatus


class FineRequest(BaseModel):
    """Request body for POST /v1/fine"""

    due_date: date
    payment_date: Optional[date] = Field(None, description="Omit while the charge is unpaid")


class FineResponse(BaseModel):
    """Response for POST /v1/fine"""

    days_late: int
    fine_amount: Decimal


class TotalRequest(BaseModel):
    """Request body for POST /v1/total"""

    base_amount: Decimal = Field(..., description="Base fee amount")
    fine_amount: Decimal = Field(Decimal(0), description="Late fine already computed")


class TotalResponse(BaseModel):
    """Response for POST /v1/total"""

    total_amount: Decimal
    amount_in_words: str


class WordsResponse(BaseModel):
    """Response for GET /v1/words"""

    amount: Decimal
    words: str


class FeeChargeSchema(BaseModel):
    """Fee charge as stored upstream"""

    amount: Decimal = Field(..., ge=0, description="Base fee amount")
    due_date: date
    status: FeeStatus = FeeStatus.PENDING
    amount_paid: Optional[Decimal] = Field(None, ge=0)
    month: str = ""
    description: str = ""


class ReceiptRequest(BaseModel):
    """Request body for POST /v1/receipt"""

    receipt_no: str = Field(..., min_length=1, description="Fee challan identifier")
    student_name: str = Field(..., min_length=1)
    grade: Optional[str] = None
    charge: FeeChargeSchema
    payment_date: Optional[date] = None


class ReceiptResponse(BaseModel):
    """Response for POST /v1/receipt"""

    receipt_no: str
    student_name: str
    grade: str
    billing_period: str
    due_date: date
    payment_date: Optional[date] = None
    status: FeeStatus
    days_late: int
    base_amount: Decimal
    fine_amount: Decimal
    total_amount: Decimal
    amount_in_words: str
    notes: List[str]
    copies: List[str]
    description: str = ""


class FeeSummaryRequest(BaseModel):
    """Request body for POST /v1/fees/summary"""

    fees: List[FeeChargeSchema]


class FeeSummaryResponse(BaseModel):
    """Response for POST /v1/fees/summary"""

    total: Decimal
    paid: Decimal
    pending: Decimal
    overdue: Decimal
