"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidCardConfigError(DomainException):
    """Closing or due day is not a calendar day number (1-31)"""

    pass


class InvalidInstallmentCountError(DomainException):
    """Installment count is not a positive integer"""

    pass


class InvalidAmountError(DomainException):
    """Purchase amount is non-positive or finer than the minor unit"""

    pass


class InvalidReferenceMonthError(DomainException):
    """Reference month token is not a valid YYYY-MM value"""

    pass


class InvalidStatusError(DomainException):
    """Payment status is not one of the known values"""

    pass
