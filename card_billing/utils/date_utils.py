"""Date manipulation utilities"""

from calendar import monthrange
from datetime import date


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given calendar month"""
    return monthrange(year, month)[1]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move a (year, month) pair by a number of calendar months"""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the last day of the month (Feb 31 -> Feb 28/29)"""
    return date(year, month, min(day, days_in_month(year, month)))
