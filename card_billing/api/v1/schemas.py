"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from card_billing.domain.exceptions import DomainException
from card_billing.domain.models import CardTransaction, PaymentStatus, ReferenceMonth

REFERENCE_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class ReferenceMonthRequest(BaseModel):
    """Request body for POST /v1/reference-month"""

    purchase_date: date
    closing_day: int = Field(..., ge=1, le=31, description="Day of month the billing window closes")


class ReferenceMonthResponse(BaseModel):
    """Response for POST /v1/reference-month"""

    reference_month: str
    first_day: date


class SplitRequest(BaseModel):
    """Request body for POST /v1/split"""

    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Purchase total")
    installments: int = Field(..., ge=1, description="Number of installments")


class SplitResponse(BaseModel):
    """Response for POST /v1/split"""

    total: Decimal
    amounts: List[Decimal]


class PlanRequest(BaseModel):
    """Request body for POST /v1/plan"""

    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Purchase total")
    installments: int = Field(..., ge=1, description="Number of installments")
    purchase_date: date
    closing_day: int = Field(..., ge=1, le=31)
    due_day: int = Field(..., ge=1, le=31)
    card_id: Optional[str] = Field(None, min_length=1, description="Card identifier")
    description: Optional[str] = None


class PlanInstallmentSchema(BaseModel):
    """Single installment in a purchase plan"""

    number: int
    label: str
    amount: Decimal
    purchase_date: date
    reference_month: str
    due_date: date
    description: Optional[str] = None


class PlanResponse(BaseModel):
    """Response for POST /v1/plan"""

    group_id: str
    card_id: Optional[str] = None
    currency: str
    total: Decimal
    first_reference_month: str
    installments: List[PlanInstallmentSchema]


class TransactionSchema(BaseModel):
    """Card or account transaction as supplied by the caller's ledger"""

    amount: Decimal = Field(..., decimal_places=2)
    reference_month: Optional[str] = Field(None, pattern=REFERENCE_MONTH_PATTERN)
    card_id: Optional[str] = None
    status: str = PaymentStatus.PENDING.value
    due_date: Optional[date] = None
    transaction_id: Optional[str] = None
    description: Optional[str] = None
    installment_group_id: Optional[str] = None
    installment_number: Optional[int] = Field(None, ge=1)
    total_installments: Optional[int] = Field(None, ge=1)

    @field_validator("status")
    @classmethod
    def check_status(cls, value: str) -> str:
        try:
            return PaymentStatus.parse(value).value
        except DomainException as e:
            raise ValueError(str(e))

    def to_domain(self) -> CardTransaction:
        return CardTransaction(
            amount=self.amount,
            reference_month=ReferenceMonth.parse(self.reference_month) if self.reference_month else None,
            card_id=self.card_id,
            status=PaymentStatus.parse(self.status),
            due_date=self.due_date,
            transaction_id=self.transaction_id,
            description=self.description,
            installment_group_id=self.installment_group_id,
            installment_number=self.installment_number,
            total_installments=self.total_installments,
        )

    @classmethod
    def from_domain(cls, txn: CardTransaction) -> "TransactionSchema":
        return cls(
            amount=txn.amount,
            reference_month=txn.reference_month.token if txn.reference_month else None,
            card_id=txn.card_id,
            status=txn.status.value,
            due_date=txn.due_date,
            transaction_id=txn.transaction_id,
            description=txn.description,
            installment_group_id=txn.installment_group_id,
            installment_number=txn.installment_number,
            total_installments=txn.total_installments,
        )


class InvoiceTotalRequest(BaseModel):
    """Request body for POST /v1/invoices/total"""

    transactions: List[TransactionSchema]
    reference_month: str = Field(..., pattern=REFERENCE_MONTH_PATTERN)
    card_id: Optional[str] = Field(None, description="Omit to sum every card")


class InvoiceTotalResponse(BaseModel):
    """Response for POST /v1/invoices/total"""

    card_id: Optional[str] = None
    reference_month: str
    total: Decimal


class InvoiceBreakdownRequest(BaseModel):
    """Request body for POST /v1/invoices/{reference_month}"""

    transactions: List[TransactionSchema]


class CardInvoiceSchema(BaseModel):
    """One card's invoice within a month"""

    card_id: str
    total: Decimal
    transactions: List[TransactionSchema]


class InvoiceBreakdownResponse(BaseModel):
    """Response for POST /v1/invoices/{reference_month}"""

    reference_month: str
    total: Decimal
    invoices: List[CardInvoiceSchema]


class StatusItem(BaseModel):
    """Status and due date of one payment"""

    status: str
    due_date: Optional[date] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, value: str) -> str:
        try:
            return PaymentStatus.parse(value).value
        except DomainException as e:
            raise ValueError(str(e))


class StatusRequest(BaseModel):
    """Request body for POST /v1/status"""

    items: List[StatusItem]
    now: Optional[datetime] = Field(None, description="Evaluation instant, defaults to server time")


class StatusResponse(BaseModel):
    """Response for POST /v1/status"""

    evaluated_at: datetime
    buckets: List[str]
