"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Tuple

MonthKey = Tuple[int, int]


def month_key(day: date) -> MonthKey:
    """(year, month) bucket for a calendar date; tuples compare chronologically"""
    return day.year, day.month


def format_month_key(key: MonthKey) -> str:
    """Render a bucket as zero-padded YYYY-MM"""
    year, month = key
    return f"{year:04d}-{month:02d}"


def window_start(as_of: date, days: int) -> date:
    """First calendar date (inclusive) of a trailing window ending at `as_of`"""
    return as_of - timedelta(days=days)
