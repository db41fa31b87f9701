"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidAmountError(DomainException):
    """Amount is not a finite number"""

    pass


class InvalidScheduleError(DomainException):
    """Fine schedule or numbering table is malformed"""

    pass
