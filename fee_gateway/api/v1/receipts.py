"""POST /v1/receipt and POST /v1/fees/summary - receipt values and fee-list totals"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from fee_gateway.api.dependencies import get_fine_schedule, get_numbering_system, get_request_id, get_settings
from fee_gateway.api.v1.schemas import (
    FeeChargeSchema,
    FeeSummaryRequest,
    FeeSummaryResponse,
    ReceiptRequest,
    ReceiptResponse,
)
from fee_gateway.config import Settings
from fee_gateway.domain.exceptions import DomainException
from fee_gateway.domain.fines import FineSchedule, fine_band
from fee_gateway.domain.models import FeeCharge, PaymentEvent
from fee_gateway.domain.receipts import build_receipt, summarize_fees
from fee_gateway.domain.words import NumberingSystem
from fee_gateway.infrastructure.observability.logging import log_receipt
from fee_gateway.infrastructure.observability.metrics import record_receipt

router = APIRouter()


def to_charge(schema: FeeChargeSchema) -> FeeCharge:
    return FeeCharge(
        amount=schema.amount,
        due_date=schema.due_date,
        status=schema.status,
        amount_paid=schema.amount_paid,
        month=schema.month,
        description=schema.description,
    )


@router.post("/receipt", response_model=ReceiptResponse)
def create_receipt(
    request_body: ReceiptRequest,
    request: Request,
    schedule: FineSchedule = Depends(get_fine_schedule),
    numbering: NumberingSystem = Depends(get_numbering_system),
    config: Settings = Depends(get_settings),
):
    """
    Compute everything a printed fee receipt shows.

    Flow:
    1. Derive the fine from due date and payment date
    2. Add it to the base fee and spell the total in words
    3. Record metrics and a structured log line
    """
    request_id = get_request_id(request)
    payment = PaymentEvent(request_body.payment_date) if request_body.payment_date else None

    try:
        receipt = build_receipt(
            to_charge(request_body.charge),
            payment,
            receipt_no=request_body.receipt_no,
            student_name=request_body.student_name,
            grade=request_body.grade,
            schedule=schedule,
            numbering=numbering,
            currency=config.currency_name,
            currency_symbol=config.currency_symbol,
        )
    except DomainException as e:
        logging.warning(f"Receipt rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_receipt(receipt.status.value, fine_band(receipt.days_late, schedule), receipt.fine_amount)
    log_receipt(request_id, receipt.receipt_no, receipt.days_late, receipt.fine_amount, receipt.total_amount)

    return ReceiptResponse(
        receipt_no=receipt.receipt_no,
        student_name=receipt.student_name,
        grade=receipt.grade,
        billing_period=receipt.billing_period,
        due_date=receipt.due_date,
        payment_date=receipt.payment_date,
        status=receipt.status,
        days_late=receipt.days_late,
        base_amount=receipt.payable.base_amount,
        fine_amount=receipt.fine_amount,
        total_amount=receipt.total_amount,
        amount_in_words=receipt.payable.words,
        notes=list(receipt.notes),
        description=receipt.description,
        copies=list(receipt.copies),
    )


@router.post("/fees/summary", response_model=FeeSummaryResponse)
def summarize(request_body: FeeSummaryRequest):
    """Total, paid, pending and overdue amounts across a fee list"""
    summary = summarize_fees(to_charge(fee) for fee in request_body.fees)

    return FeeSummaryResponse(
        total=summary.total,
        paid=summary.paid,
        pending=summary.pending,
        overdue=summary.overdue,
    )
