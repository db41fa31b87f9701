"""Payable total = base fee + late fine"""

from decimal import Decimal

from fee_gateway.domain.models import PayableTotal
from fee_gateway.domain.words import INDIAN_NUMBERING, NumberingSystem, amount_to_words
from fee_gateway.utils.amounts import AmountInput, to_amount


def compute_total(base_amount: AmountInput, fine_amount: AmountInput) -> Decimal:
    """
    Sum base amount and fine.

    Negative inputs are clamped to zero (and logged) before adding. No
    rounding is applied beyond the precision of the inputs.
    """
    return to_amount(base_amount, "base_amount") + to_amount(fine_amount, "fine_amount")


def compute_payable(
    base_amount: AmountInput,
    fine_amount: AmountInput,
    numbering: NumberingSystem = INDIAN_NUMBERING,
    currency: str = "Rupees",
) -> PayableTotal:
    """Total payable plus its words rendering, as printed on the receipt"""
    base = to_amount(base_amount, "base_amount")
    fine = to_amount(fine_amount, "fine_amount")
    total = base + fine

    return PayableTotal(
        base_amount=base,
        fine_amount=fine,
        total_amount=total,
        words=amount_to_words(total, numbering=numbering, currency=currency),
    )
