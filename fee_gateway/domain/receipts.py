"""Fee receipt assembly and fee-list aggregation"""

from decimal import Decimal
from typing import Iterable, List, Optional

from fee_gateway.domain.fines import (
    LATE_FINE_SCHEDULE,
    FineSchedule,
    compute_fine_result,
    describe_schedule,
    schedule_span,
)
from fee_gateway.domain.models import FeeCharge, FeeReceipt, FeeStatus, FeeSummary, PaymentEvent
from fee_gateway.domain.totals import compute_payable
from fee_gateway.domain.words import INDIAN_NUMBERING, NumberingSystem
from fee_gateway.utils.amounts import to_amount

UNASSIGNED_GRADE = "Not Assigned"
DUES_NOTE = "Dues must be paid on or before the due date to avoid late payment charges."
SYSTEM_GENERATED_NOTE = "This is system generated fee challan and does not require any signature."


def billing_period(charge: FeeCharge) -> str:
    """Month label stored on the charge, else "<Month> <Year>" of the due date"""
    if charge.month and charge.month.strip():
        return charge.month
    return charge.due_date.strftime("%B %Y")


def receipt_notes(schedule: FineSchedule = LATE_FINE_SCHEDULE, currency_symbol: str = "Rs.") -> List[str]:
    """
    Printed notes: dues reminder, one line per fine tier, the cancellation
    notice at the end of the schedule, and the system-generated disclaimer.

    The cancellation line is notice text only; no receipt value reflects it.
    """
    return (
        [DUES_NOTE]
        + describe_schedule(schedule, currency_symbol)
        + [
            f"After {schedule_span(schedule)} days of due date passed, Admission will be cancelled",
            SYSTEM_GENERATED_NOTE,
        ]
    )


def build_receipt(
    charge: FeeCharge,
    payment: Optional[PaymentEvent] = None,
    *,
    receipt_no: str,
    student_name: str,
    grade: Optional[str] = None,
    schedule: FineSchedule = LATE_FINE_SCHEDULE,
    numbering: NumberingSystem = INDIAN_NUMBERING,
    currency: str = "Rupees",
    currency_symbol: str = "Rs.",
) -> FeeReceipt:
    """
    Assemble the values shown on a fee receipt.

    Flow:
    1. Work out days late and the fine from due date and payment date
    2. Add the fine to the base amount and spell the total in words
    3. Attach the billing period label and the fine schedule notes
    """
    payment_date = payment.payment_date if payment else None
    fine = compute_fine_result(charge.due_date, payment_date, schedule)
    payable = compute_payable(charge.amount, fine.fine_amount, numbering=numbering, currency=currency)

    return FeeReceipt(
        receipt_no=receipt_no,
        student_name=student_name,
        grade=grade or UNASSIGNED_GRADE,
        billing_period=billing_period(charge),
        due_date=charge.due_date,
        payment_date=payment_date,
        status=charge.status,
        days_late=fine.days_late,
        payable=payable,
        notes=tuple(receipt_notes(schedule, currency_symbol)),
        description=charge.description,
    )


def summarize_fees(charges: Iterable[FeeCharge]) -> FeeSummary:
    """
    Aggregate a student's fee list for the dashboard cards.

    - total: every charge's amount
    - paid: amount_paid (falling back to amount) over paid charges
    - pending / overdue: outstanding amount - amount_paid per status
    """
    summary = FeeSummary()

    for charge in charges:
        amount = to_amount(charge.amount)
        paid = to_amount(charge.amount_paid, "amount_paid") if charge.amount_paid is not None else None
        summary.total += amount

        if charge.status == FeeStatus.PAID:
            summary.paid += paid if paid else amount
        else:
            outstanding = max(Decimal(0), amount - (paid or Decimal(0)))
            if charge.status == FeeStatus.PENDING:
                summary.pending += outstanding
            else:
                summary.overdue += outstanding

    return summary
