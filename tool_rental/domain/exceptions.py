"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RentalValidationError(DomainException):
    """Caller supplied a value that violates a rental invariant"""

    pass


class RequiredFieldMissingError(RentalValidationError):
    """A mandatory argument or field was absent"""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidRentalDurationError(RentalValidationError):
    """Rental duration is below one day"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"The rental duration {value} is invalid. Please enter a value of 1 or greater.")


class DiscountOutOfRangeError(RentalValidationError):
    """Discount percentage is outside 0-100"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"The value {value} for the discount percentage is invalid. Please provide a number between 0 and 100."
        )


class NegativeChargeableDaysError(RentalValidationError):
    """Chargeable day count handed to an agreement is negative"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid calculation of chargeable days: {value}. Must be 0 or greater.")


class InvalidDailyChargeError(RentalValidationError):
    """Tool type daily charge is negative"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Daily charge {value} is invalid. Must be 0 or greater.")


class RentalPeriodOutOfRangeError(RentalValidationError):
    """Rental period runs past the last representable calendar date"""

    def __init__(self, checkout_date, rental_duration: int):
        self.checkout_date = checkout_date
        self.rental_duration = rental_duration
        super().__init__(
            f"A rental of {rental_duration} days from {checkout_date} ends after the last supported date."
        )


class UnknownToolCodeError(DomainException):
    """Tool code is not in the catalog"""

    def __init__(self, tool_code: str):
        self.tool_code = tool_code
        super().__init__(f'Tool code "{tool_code}" not found.')


class ToolCatalogInitializationError(DomainException):
    """Tool catalog data could not be loaded; the service cannot run without it"""

    pass
