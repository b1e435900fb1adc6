"""Date utilities: rental day ranges and the observed billing holidays"""

from datetime import date, timedelta
from typing import Iterator

SATURDAY = 5
SUNDAY = 6
MONDAY = 0


def rental_days(checkout_date: date, rental_duration: int) -> Iterator[date]:
    """Days covered by a rental, yielded lazily. Billing starts the day after checkout."""
    for i in range(1, rental_duration + 1):
        yield checkout_date + timedelta(days=i)


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def is_labor_day(day: date) -> bool:
    """
    Labor Day is the first Monday in September.

    A Monday in September is the first one when the same weekday a week
    earlier still falls in August.
    """
    if day.month != 9 or day.weekday() != MONDAY:
        return False
    return (day - timedelta(days=7)).month == 8


def observed_independence_day(year: int) -> date:
    """
    July 4th as observed in the given year.

    Saturday -> Friday July 3rd, Sunday -> Monday July 5th, otherwise July 4th.
    """
    holiday = date(year, 7, 4)
    if holiday.weekday() == SATURDAY:
        return holiday - timedelta(days=1)
    if holiday.weekday() == SUNDAY:
        return holiday + timedelta(days=1)
    return holiday


def is_independence_day_observed(day: date) -> bool:
    return day == observed_independence_day(day.year)


def is_holiday(day: date) -> bool:
    """True on observed Independence Day or Labor Day"""
    return is_labor_day(day) or is_independence_day_observed(day)
