"""Domain models - immutable dataclasses representing rental entities"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from tool_rental.domain.exceptions import (
    DiscountOutOfRangeError,
    InvalidDailyChargeError,
    InvalidRentalDurationError,
    NegativeChargeableDaysError,
    RentalPeriodOutOfRangeError,
    RequiredFieldMissingError,
)
from tool_rental.domain.pricing import calculate_rental_price

MIN_RENTAL_DURATION = 1
MIN_DISCOUNT = 0
MAX_DISCOUNT = 100
MIN_CHARGEABLE_DAYS = 0


def due_date(checkout_date: date, rental_duration: int) -> date:
    """Last day of the rental. Raises RentalPeriodOutOfRangeError past date.max."""
    try:
        return checkout_date + timedelta(days=rental_duration)
    except OverflowError as e:
        raise RentalPeriodOutOfRangeError(checkout_date, rental_duration) from e


def require(value, field_name: str):
    """Return value, raising RequiredFieldMissingError when it is None or empty"""
    if value is None or value == "":
        raise RequiredFieldMissingError(field_name)
    return value


@dataclass(frozen=True)
class ToolType:
    """Kind of tool with its daily rate and the days it is charged on"""

    name: str
    daily_charge: Decimal
    has_weekday_charge: bool
    has_weekend_charge: bool
    has_holiday_charge: bool

    def __post_init__(self):
        require(self.name, "name")
        require(self.daily_charge, "daily_charge")

        # Go through str so floats keep their written value
        if not isinstance(self.daily_charge, Decimal):
            object.__setattr__(self, "daily_charge", Decimal(str(self.daily_charge)))

        if self.daily_charge < 0:
            raise InvalidDailyChargeError(self.daily_charge)


@dataclass(frozen=True)
class Tool:
    """Rentable tool, unique per catalog by tool_code"""

    tool_code: str
    tool_type: ToolType
    brand_name: str

    def __post_init__(self):
        require(self.tool_code, "tool_code")
        require(self.tool_type, "tool_type")
        require(self.brand_name, "brand_name")


@dataclass(frozen=True)
class RentalAgreement:
    """
    Priced rental of a single tool.

    Inputs are validated in a fixed order, each failing with its own error:
    tool, checkout_date, rental_duration, discount_percent, chargeable_days.

    chargeable_days <= rental_duration is the caller's responsibility and is
    not checked here.
    """

    tool: Tool
    rental_duration: int
    checkout_date: date
    chargeable_days: int
    discount_percent: int

    rental_due_date: date = field(init=False)
    pre_discount_price: Decimal = field(init=False)
    discount_amount: Decimal = field(init=False)
    final_price: Decimal = field(init=False)

    def __post_init__(self):
        require(self.tool, "tool")
        require(self.checkout_date, "checkout_date")

        if self.rental_duration < MIN_RENTAL_DURATION:
            raise InvalidRentalDurationError(self.rental_duration)

        if self.discount_percent < MIN_DISCOUNT or self.discount_percent > MAX_DISCOUNT:
            raise DiscountOutOfRangeError(self.discount_percent)

        if self.chargeable_days < MIN_CHARGEABLE_DAYS:
            raise NegativeChargeableDaysError(self.chargeable_days)

        rental_due_date = due_date(self.checkout_date, self.rental_duration)

        price = calculate_rental_price(
            self.tool.tool_type.daily_charge,
            self.chargeable_days,
            self.discount_percent,
        )

        object.__setattr__(self, "pre_discount_price", price.pre_discount_price)
        object.__setattr__(self, "discount_amount", price.discount_amount)
        object.__setattr__(self, "final_price", price.final_price)
        object.__setattr__(self, "rental_due_date", rental_due_date)
