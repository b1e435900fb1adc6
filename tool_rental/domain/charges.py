"""Charge policy - decides which rental days are billed"""

from datetime import date

from tool_rental.domain.models import ToolType
from tool_rental.utils.date_utils import is_holiday, is_weekend, rental_days


def is_chargeable_day(tool_type: ToolType, day: date) -> bool:
    """
    Whether a single rental day is billed for the given tool type.

    Rules, first match wins:
    - Holiday and the tool is free on holidays: not billed (even on a weekend)
    - Saturday/Sunday: billed if the tool charges on weekends
    - Any other day: billed if the tool charges on weekdays

    A holiday the tool does charge for falls through to the weekend/weekday
    rule for the day it lands on.
    """
    if is_holiday(day) and not tool_type.has_holiday_charge:
        return False

    if is_weekend(day):
        return tool_type.has_weekend_charge

    return tool_type.has_weekday_charge


def count_chargeable_days(tool_type: ToolType, checkout_date: date, rental_duration: int) -> int:
    """
    Count billed days, starting from the full duration and dropping one per free day.

    The checkout date itself is never billed.
    """
    chargeable_days = rental_duration
    for day in rental_days(checkout_date, rental_duration):
        if not is_chargeable_day(tool_type, day):
            chargeable_days -= 1
    return chargeable_days
