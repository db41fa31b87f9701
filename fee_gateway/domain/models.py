"""Domain models - pure Python dataclasses representing fee records and derived values"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class FeeStatus(str, Enum):
    """Lifecycle state of a fee charge as recorded upstream"""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class FeeCharge:
    """Single billable obligation (e.g. monthly tuition)"""

    amount: Decimal
    due_date: date
    status: FeeStatus = FeeStatus.PENDING
    amount_paid: Optional[Decimal] = None
    month: str = ""
    description: str = ""


@dataclass(frozen=True)
class PaymentEvent:
    """Payment recorded against a charge"""

    payment_date: date


@dataclass(frozen=True)
class FineResult:
    """Late fine derived from due and payment dates"""

    days_late: int
    fine_amount: Decimal


@dataclass(frozen=True)
class PayableTotal:
    """Base amount plus fine, with its words rendering"""

    base_amount: Decimal
    fine_amount: Decimal
    total_amount: Decimal
    words: str


@dataclass(frozen=True)
class FeeReceipt:
    """Everything a printed fee receipt shows, without the markup"""

    receipt_no: str
    student_name: str
    grade: str
    billing_period: str
    due_date: date
    payment_date: Optional[date]
    status: FeeStatus
    days_late: int
    payable: PayableTotal
    notes: Tuple[str, ...] = ()
    description: str = ""
    copies: Tuple[str, ...] = ("STUDENT", "CAMPUS", "BANK")

    @property
    def fine_amount(self) -> Decimal:
        return self.payable.fine_amount

    @property
    def total_amount(self) -> Decimal:
        return self.payable.total_amount


@dataclass
class FeeSummary:
    """Aggregated view of a student's fee list"""

    total: Decimal = field(default_factory=Decimal)
    paid: Decimal = field(default_factory=Decimal)
    pending: Decimal = field(default_factory=Decimal)
    overdue: Decimal = field(default_factory=Decimal)
