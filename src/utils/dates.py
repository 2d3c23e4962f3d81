from __future__ import annotations

import calendar
from datetime import date, timedelta


def age_in_weeks(date_of_birth: date, today: date) -> int:
    """Whole weeks elapsed between ``date_of_birth`` and ``today``."""
    return (today - date_of_birth).days // 7


def age_in_years(date_of_birth: date, today: date) -> int:
    """Whole calendar years elapsed (birthday must have passed)."""
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


def add_weeks(value: date, weeks: int) -> date:
    return value + timedelta(weeks=weeks)


def add_months(value: date, months: int) -> date:
    """Calendar month arithmetic; the day is clamped to the target month's end.

    2024-01-31 + 1 month -> 2024-02-29.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_past(value: date, today: date) -> int:
    return (today - value).days
