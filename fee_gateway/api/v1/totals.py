"""POST /v1/total and GET /v1/words - payable total and amount in words"""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from fee_gateway.api.dependencies import get_numbering_system, get_request_id, get_settings
from fee_gateway.api.v1.schemas import TotalRequest, TotalResponse, WordsResponse
from fee_gateway.config import Settings
from fee_gateway.domain.exceptions import InvalidAmountError
from fee_gateway.domain.totals import compute_payable
from fee_gateway.domain.words import NumberingSystem, amount_to_words

router = APIRouter()


@router.post("/total", response_model=TotalResponse)
def calculate_total(
    request_body: TotalRequest,
    request: Request,
    numbering: NumberingSystem = Depends(get_numbering_system),
    config: Settings = Depends(get_settings),
):
    """Base amount plus fine; negative inputs are clamped to zero"""
    try:
        payable = compute_payable(
            request_body.base_amount,
            request_body.fine_amount,
            numbering=numbering,
            currency=config.currency_name,
        )
    except InvalidAmountError as e:
        logging.warning(f"Invalid amount: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return TotalResponse(total_amount=payable.total_amount, amount_in_words=payable.words)


@router.get("/words", response_model=WordsResponse)
def render_words(
    request: Request,
    amount: Decimal = Query(..., description="Currency amount; fractional part is dropped"),
    numbering: NumberingSystem = Depends(get_numbering_system),
    config: Settings = Depends(get_settings),
):
    """Spell an amount in words with the configured grouping and currency"""
    try:
        words = amount_to_words(amount, numbering=numbering, currency=config.currency_name)
    except InvalidAmountError as e:
        logging.warning(f"Invalid amount: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return WordsResponse(amount=amount, words=words)
