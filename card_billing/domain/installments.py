"""Installment splitting and plan generation for card purchases"""

import uuid
from datetime import date
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP, InvalidOperation
from typing import List

from card_billing.domain.billing_cycle import resolve_reference_month
from card_billing.domain.exceptions import InvalidAmountError, InvalidInstallmentCountError
from card_billing.domain.models import (
    CardConfig,
    CardTransaction,
    Installment,
    PaymentStatus,
    validate_day,
)

CENT = Decimal("0.01")
DEFAULT_DESCRIPTION = "Installment purchase"


def to_money(value: Decimal | int | float | str) -> Decimal:
    """
    Convert an amount to a Decimal with minor-unit precision.

    Floats go through str() so 0.1 stays 0.1. Amounts finer than one cent
    are rejected rather than rounded.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise InvalidAmountError(f"Amount must be finite, got {value!r}")
        quantized = amount.quantize(CENT)
    except InvalidOperation:
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")

    if amount != quantized:
        raise InvalidAmountError(f"Amount has sub-cent precision: {value!r}")
    return quantized


def _validate_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidInstallmentCountError(f"Installment count must be a positive integer, got {count!r}")


def split_amount(total: Decimal | int | float | str, count: int) -> List[Decimal]:
    """
    Split a purchase total into installment amounts.

    Requirements:
    - Every installment but the last is floor(total / count) to 2 decimals
    - Last installment absorbs the remainder, so the parts sum exactly to total

    Example:
        100.00 / 3 -> [33.33, 33.33, 33.34]
        base = floor(33.333..) = 33.33, remainder = 100.00 - 99.99 = 0.01
    """
    _validate_count(count)
    amount = to_money(total)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")

    base = (amount / count).quantize(CENT, rounding=ROUND_FLOOR)
    remainder = (amount - base * count).quantize(CENT, rounding=ROUND_HALF_UP)

    amounts = [base] * count
    amounts[-1] = base + remainder
    return amounts


def build_installment_plan(
    total: Decimal | int | float | str,
    count: int,
    purchase_date: date,
    closing_day: int,
    due_day: int,
) -> List[Installment]:
    """
    Generate one invoice-tagged installment per month for a card purchase.

    - First reference month follows the card's closing day (see billing_cycle)
    - Installment i (0-based) is billed i months after the first one
    - Due date is due_day of its reference month, clamped to the last day of
      short months (due_day=31 in February -> Feb 28/29)

    Returns:
        Installments numbered 1..count in increasing reference month order
    """
    validate_day(due_day, "due_day")
    first_month = resolve_reference_month(purchase_date, closing_day)
    amounts = split_amount(total, count)

    installments = []
    for i, amount in enumerate(amounts):
        reference_month = first_month.shift(i)
        installments.append(
            Installment(
                number=i + 1,
                total_installments=count,
                amount=amount,
                purchase_date=purchase_date,
                reference_month=reference_month,
                due_date=reference_month.day(due_day),
            )
        )

    return installments


def build_plan_for_card(
    total: Decimal | int | float | str,
    count: int,
    purchase_date: date,
    card: CardConfig,
) -> List[Installment]:
    """Same as build_installment_plan, taking the card's configuration"""
    return build_installment_plan(total, count, purchase_date, card.closing_day, card.due_day)


def plan_to_transactions(
    plan: List[Installment],
    card_id: str | None,
    description: str | None = None,
    group_id: str | None = None,
) -> List[CardTransaction]:
    """Turn a plan into pending card transactions sharing one installment group"""
    group_id = group_id or str(uuid.uuid4())
    description = description or DEFAULT_DESCRIPTION

    return [
        CardTransaction(
            amount=inst.amount,
            reference_month=inst.reference_month,
            card_id=card_id,
            status=PaymentStatus.PENDING,
            due_date=inst.due_date,
            description=f"{description} ({inst.label})",
            installment_group_id=group_id,
            installment_number=inst.number,
            total_installments=inst.total_installments,
        )
        for inst in plan
    ]
