"""POST /v1/fine - late-payment fine for a single charge"""

from fastapi import APIRouter, Depends

from fee_gateway.api.dependencies import get_fine_schedule
from fee_gateway.api.v1.schemas import FineRequest, FineResponse
from fee_gateway.domain.fines import FineSchedule, compute_fine_result, fine_band
from fee_gateway.infrastructure.observability.metrics import record_fine

router = APIRouter()


@router.post("/fine", response_model=FineResponse)
def calculate_fine(
    request_body: FineRequest,
    schedule: FineSchedule = Depends(get_fine_schedule),
):
    """
    Compute days late and the tiered fine.

    An absent payment date, or one on/before the due date, yields no fine.
    """
    result = compute_fine_result(request_body.due_date, request_body.payment_date, schedule)
    record_fine(fine_band(result.days_late, schedule), result.fine_amount)

    return FineResponse(days_late=result.days_late, fine_amount=result.fine_amount)
