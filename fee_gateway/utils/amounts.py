"""Currency amount coercion shared by the fine, total and words calculators"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from fee_gateway.domain.exceptions import InvalidAmountError

AmountInput = Union[Decimal, int, float, str]


def to_decimal(value: AmountInput) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    Ints convert directly; floats go through str() so 0.1 stays 0.1 instead
    of its binary expansion.

    Raises:
        InvalidAmountError: value is not numeric, or is NaN/infinite
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")

    try:
        if isinstance(value, (Decimal, int)):
            amount = Decimal(value)
        else:
            amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        # repr() of the value can itself fail (int string-conversion limit)
        raise InvalidAmountError(f"Amount must be numeric, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    return amount


def to_amount(value: AmountInput, field_name: str = "amount") -> Decimal:
    """Convert to a non-negative Decimal, clamping negatives to zero"""
    amount = to_decimal(value)
    if amount < 0:
        logging.warning(
            "Negative amount clamped to zero",
            extra={"field": field_name, "amount": str(amount)},
        )
        return Decimal(0)
    return amount
