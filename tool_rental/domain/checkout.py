"""Checkout - core entry point turning a rental request into a priced agreement"""

from datetime import date
from typing import Optional, Protocol

from tool_rental.domain.charges import count_chargeable_days
from tool_rental.domain.exceptions import UnknownToolCodeError
from tool_rental.domain.models import MIN_RENTAL_DURATION, RentalAgreement, Tool, due_date, require


class ToolLookup(Protocol):
    """Anything that can resolve a tool code to a Tool"""

    def lookup(self, tool_code: str) -> Optional[Tool]:
        ...


class Checkout:
    """Prices tool rentals against a tool catalog"""

    def __init__(self, catalog: ToolLookup):
        self.catalog = catalog

    def checkout(
        self,
        tool_code: str,
        checkout_date: date,
        rental_duration: int,
        discount_percent: int,
    ) -> RentalAgreement:
        """
        Build the rental agreement for a checkout.

        Flow:
        1. Require tool_code and checkout_date
        2. Resolve the tool from the catalog
        3. Confirm the rental period ends on a representable date
        4. Count chargeable days after the checkout date
        5. Construct the agreement (validates duration, discount and day count)

        Raises:
            RequiredFieldMissingError: tool_code or checkout_date absent
            UnknownToolCodeError: tool_code not in the catalog
            RentalPeriodOutOfRangeError: rental would end after date.max
            InvalidRentalDurationError, DiscountOutOfRangeError: from RentalAgreement
        """
        require(tool_code, "tool_code")
        require(checkout_date, "checkout_date")

        tool = self.catalog.lookup(tool_code)
        if tool is None:
            raise UnknownToolCodeError(tool_code)

        # Scan and due date both reach checkout_date + rental_duration
        if rental_duration >= MIN_RENTAL_DURATION:
            due_date(checkout_date, rental_duration)

        chargeable_days = count_chargeable_days(tool.tool_type, checkout_date, rental_duration)

        return RentalAgreement(
            tool=tool,
            rental_duration=rental_duration,
            checkout_date=checkout_date,
            chargeable_days=chargeable_days,
            discount_percent=discount_percent,
        )
