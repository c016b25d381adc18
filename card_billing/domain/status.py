"""Payment urgency classification for display"""

import math
from datetime import date, datetime, time
from typing import Iterable, List

from card_billing.domain.models import CardTransaction, PaymentStatus, StatusBucket

DUE_SOON_DAYS = 5
SECONDS_PER_DAY = 24 * 60 * 60


def days_until_due(due_date: date | datetime, now: datetime) -> int:
    """
    Whole days remaining until due, rounded up.

    A plain date means midnight of that day in now's timezone, so a due date
    tomorrow seen at 08:00 today is 1 day away. A naive datetime on one side
    is read in the other side's timezone. Past due dates give zero or
    negative values.
    """
    if not isinstance(due_date, datetime):
        due_date = datetime.combine(due_date, time.min, tzinfo=now.tzinfo)
    elif due_date.tzinfo is None and now.tzinfo is not None:
        due_date = due_date.replace(tzinfo=now.tzinfo)
    elif now.tzinfo is None and due_date.tzinfo is not None:
        now = now.replace(tzinfo=due_date.tzinfo)
    return math.ceil((due_date - now).total_seconds() / SECONDS_PER_DAY)


def classify_status(
    status: PaymentStatus | str,
    due_date: date | datetime | None,
    now: datetime,
    due_soon_days: int = DUE_SOON_DAYS,
) -> StatusBucket:
    """
    Map a payment status (and due date, when pending) to an urgency bucket.

    - settled -> paid
    - overdue or cancelled -> overdue (same urgency rendering)
    - pending due within due_soon_days (inclusive) -> due-soon
    - pending otherwise, or without a due date -> normal
    """
    status = PaymentStatus.parse(status)

    if status is PaymentStatus.SETTLED:
        return StatusBucket.PAID
    if status in (PaymentStatus.OVERDUE, PaymentStatus.CANCELLED):
        return StatusBucket.OVERDUE

    if due_date is not None and days_until_due(due_date, now) <= due_soon_days:
        return StatusBucket.DUE_SOON

    return StatusBucket.NORMAL


def classify_many(
    transactions: Iterable[CardTransaction],
    now: datetime,
    due_soon_days: int = DUE_SOON_DAYS,
) -> List[StatusBucket]:
    """Classify a batch against a single clock reading, preserving input order"""
    return [classify_status(txn.status, txn.due_date, now, due_soon_days) for txn in transactions]
