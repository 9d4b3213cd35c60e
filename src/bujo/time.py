# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum

MIN_YEAR = datetime.MINYEAR
MAX_YEAR = datetime.MAXYEAR


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string to a pendulum.Date."""
    parsed = pendulum.parse(date_str)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    return cast(pendulum.Date, parsed)


def to_pendulum_date(date: datetime.date) -> pendulum.Date:
    if isinstance(date, pendulum.DateTime):
        return date.date()
    if isinstance(date, pendulum.Date):
        return date
    return pendulum.Date(date.year, date.month, date.day)


def next_day(date: pendulum.Date) -> pendulum.Date:
    """The following calendar day, or the same day at the end of the range."""
    try:
        return date.add(days=1)
    except (OverflowError, ValueError):
        return date


def previous_day(date: pendulum.Date) -> pendulum.Date:
    """The preceding calendar day, or the same day at the start of the range."""
    try:
        return date.subtract(days=1)
    except (OverflowError, ValueError):
        return date


def next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        if year >= MAX_YEAR:
            return year, month
        return year + 1, 1
    return year, month + 1


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        if year <= MIN_YEAR:
            return year, month
        return year - 1, 12
    return year, month - 1


def day_of_year_info(date: pendulum.Date) -> str:
    days_in_year = 366 if date.is_leap_year() else 365
    return f"Day {date.day_of_year} of {days_in_year}"


def date_to_display_str(date: pendulum.Date, date_format: str) -> str:
    return date.format(date_format)


def month_name(year: int, month: int) -> str:
    return pendulum.Date(year, month, 1).format("MMMM")
