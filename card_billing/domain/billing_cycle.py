"""Billing cycle resolution - which monthly invoice a purchase lands on"""

from datetime import date

from card_billing.domain.models import ReferenceMonth, validate_day

# Months between the purchase month and its first invoice
BEFORE_CLOSE_OFFSET = 1
AFTER_CLOSE_OFFSET = 2


def resolve_reference_month(purchase_date: date, closing_day: int) -> ReferenceMonth:
    """
    Determine the invoice (reference month) a purchase is billed under.

    Rules:
    - Purchase day <= closing day: the current cycle is still open, so the
      purchase is billed on next month's invoice (purchase month + 1)
    - Purchase day > closing day: the cycle already closed, so it rolls to
      the invoice after that (purchase month + 2)

    Only the day-of-month is compared; the due day plays no part.

    Example:
        closing_day=10, purchase 2025-03-10 -> 2025-04
        closing_day=10, purchase 2025-03-11 -> 2025-05
    """
    validate_day(closing_day, "closing_day")

    offset = AFTER_CLOSE_OFFSET if purchase_date.day > closing_day else BEFORE_CLOSE_OFFSET
    return ReferenceMonth.from_date(purchase_date).shift(offset)
