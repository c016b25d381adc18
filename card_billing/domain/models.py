"""Domain models - pure Python dataclasses representing billing entities"""

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List

from card_billing.domain.exceptions import (
    InvalidCardConfigError,
    InvalidReferenceMonthError,
    InvalidStatusError,
)
from card_billing.utils.date_utils import clamped_date, shift_month

_TOKEN_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, order=True)
class ReferenceMonth:
    """Year-month an invoice is billed under, serialized as "YYYY-MM" """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidReferenceMonthError(f"Month must be 1-12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise InvalidReferenceMonthError(f"Year out of range: {self.year}")

    @classmethod
    def parse(cls, token: str) -> "ReferenceMonth":
        """Parse a "2025-12" style token"""
        match = _TOKEN_PATTERN.match(token.strip()) if isinstance(token, str) else None
        if match is None:
            raise InvalidReferenceMonthError(f"Invalid reference month token: {token!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_date(cls, value: date) -> "ReferenceMonth":
        return cls(value.year, value.month)

    @classmethod
    def coerce(cls, value: "ReferenceMonth | str") -> "ReferenceMonth":
        """Accept either a ReferenceMonth or its string token"""
        if isinstance(value, ReferenceMonth):
            return value
        return cls.parse(value)

    def shift(self, months: int) -> "ReferenceMonth":
        year, month = shift_month(self.year, self.month, months)
        return ReferenceMonth(year, month)

    def day(self, day: int) -> date:
        """Date in this month, with day clamped to the month's last day"""
        return clamped_date(self.year, self.month, day)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def token(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class CardConfig:
    """Billing geometry of a credit card"""

    closing_day: int
    due_day: int

    def __post_init__(self) -> None:
        validate_day(self.closing_day, "closing_day")
        validate_day(self.due_day, "due_day")


def validate_day(value: int, name: str) -> None:
    """Reject anything that is not a calendar day number (1-31)"""
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 31:
        raise InvalidCardConfigError(f"{name} must be an integer between 1 and 31, got {value!r}")


class PaymentStatus(str, Enum):
    """Payment status of a transaction, using the stored wire values"""

    SETTLED = "efetivada"
    PENDING = "pendente"
    CANCELLED = "cancelada"
    OVERDUE = "vencido"

    @classmethod
    def parse(cls, value: "PaymentStatus | str") -> "PaymentStatus":
        """Accept the wire value, the English name, or a known alias"""
        if isinstance(value, PaymentStatus):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        if key in _STATUS_ALIASES:
            return _STATUS_ALIASES[key]
        raise InvalidStatusError(f"Unknown payment status: {value!r}")


_STATUS_ALIASES = {
    "pago": PaymentStatus.SETTLED,
    "paid": PaymentStatus.SETTLED,
    "canceled": PaymentStatus.CANCELLED,
}


class StatusBucket(str, Enum):
    """Display urgency derived from status and due date"""

    PAID = "paid"
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    NORMAL = "normal"


@dataclass(frozen=True)
class Installment:
    """Single scheduled payment of an installment purchase"""

    number: int
    total_installments: int
    amount: Decimal
    purchase_date: date
    reference_month: ReferenceMonth
    due_date: date

    @property
    def label(self) -> str:
        return f"{self.number}/{self.total_installments}"


@dataclass(frozen=True)
class CardTransaction:
    """Transaction record as consumed by invoice aggregation and status classification"""

    amount: Decimal
    reference_month: ReferenceMonth | None = None
    card_id: str | None = None  # None for cash/account transactions
    status: PaymentStatus = PaymentStatus.PENDING
    due_date: date | None = None
    transaction_id: str | None = None
    description: str | None = None
    installment_group_id: str | None = None
    installment_number: int | None = None
    total_installments: int | None = None


@dataclass
class InvoiceSummary:
    """Derived invoice of one card for one reference month"""

    card_id: str
    reference_month: ReferenceMonth
    total: Decimal = Decimal("0.00")
    transactions: List[CardTransaction] = field(default_factory=list)
