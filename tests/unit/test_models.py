"""Unit tests for domain value objects"""

import pytest
from datetime import date
from card_billing.domain.models import CardConfig, PaymentStatus, ReferenceMonth
from card_billing.domain.exceptions import (
    InvalidCardConfigError,
    InvalidReferenceMonthError,
    InvalidStatusError,
)
from card_billing.utils.date_utils import clamped_date, days_in_month, shift_month


def test_reference_month_parse_and_format():
    month = ReferenceMonth.parse("2025-12")
    assert month == ReferenceMonth(2025, 12)
    assert str(month) == "2025-12"
    assert ReferenceMonth(2025, 1).token == "2025-01"


@pytest.mark.parametrize("token", ["2025-13", "2025-00", "2025-1", "25-01", "2025/01", "", "abc"])
def test_reference_month_parse_rejects(token):
    with pytest.raises(InvalidReferenceMonthError):
        ReferenceMonth.parse(token)


def test_reference_month_shift():
    month = ReferenceMonth(2025, 11)
    assert month.shift(1) == ReferenceMonth(2025, 12)
    assert month.shift(2) == ReferenceMonth(2026, 1)
    assert month.shift(14) == ReferenceMonth(2027, 1)
    assert month.shift(-11) == ReferenceMonth(2024, 12)
    assert month.shift(0) == month


def test_reference_month_ordering():
    assert ReferenceMonth(2025, 12) < ReferenceMonth(2026, 1)
    assert sorted([ReferenceMonth(2026, 1), ReferenceMonth(2025, 2)]) == [
        ReferenceMonth(2025, 2),
        ReferenceMonth(2026, 1),
    ]


def test_reference_month_day_clamps():
    assert ReferenceMonth(2025, 2).day(31) == date(2025, 2, 28)
    assert ReferenceMonth(2025, 3).day(31) == date(2025, 3, 31)
    assert ReferenceMonth(2025, 3).first_day == date(2025, 3, 1)


def test_reference_month_coerce():
    month = ReferenceMonth(2025, 3)
    assert ReferenceMonth.coerce(month) is month
    assert ReferenceMonth.coerce("2025-03") == month


def test_reference_month_from_date():
    assert ReferenceMonth.from_date(date(2025, 7, 31)) == ReferenceMonth(2025, 7)


@pytest.mark.parametrize("closing_day, due_day", [(0, 10), (10, 32), (True, 10), ("5", 10)])
def test_card_config_rejects_invalid_days(closing_day, due_day):
    with pytest.raises(InvalidCardConfigError):
        CardConfig(closing_day=closing_day, due_day=due_day)


def test_card_config_valid():
    card = CardConfig(closing_day=31, due_day=1)
    assert card.closing_day == 31


def test_payment_status_parse():
    assert PaymentStatus.parse("efetivada") is PaymentStatus.SETTLED
    assert PaymentStatus.parse("settled") is PaymentStatus.SETTLED
    assert PaymentStatus.parse(" Pendente ") is PaymentStatus.PENDING
    assert PaymentStatus.parse("canceled") is PaymentStatus.CANCELLED
    assert PaymentStatus.parse(PaymentStatus.OVERDUE) is PaymentStatus.OVERDUE
    with pytest.raises(InvalidStatusError):
        PaymentStatus.parse("unknown")


def test_date_utils():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert shift_month(2025, 12, 1) == (2026, 1)
    assert shift_month(2025, 1, -1) == (2024, 12)
    assert clamped_date(2025, 4, 31) == date(2025, 4, 30)
