"""Human-readable rendering of rental agreements"""

from datetime import date
from decimal import Decimal

from tool_rental.domain.models import RentalAgreement

DATE_FORMAT = "%m/%d/%y"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_currency(amount: Decimal) -> str:
    """$1,234.56"""
    return f"${amount:,.2f}"


def render_agreement(agreement: RentalAgreement) -> str:
    """Render an agreement as one 'Label: value' line per field"""
    tool = agreement.tool
    lines = [
        f"Tool code: {tool.tool_code}",
        f"Tool type: {tool.tool_type.name}",
        f"Brand: {tool.brand_name}",
        f"Checkout date: {format_date(agreement.checkout_date)}",
        f"Rental duration: {agreement.rental_duration} days",
        f"Due date: {format_date(agreement.rental_due_date)}",
        f"Daily rental charge: {format_currency(tool.tool_type.daily_charge)}",
        f"Charged days: {agreement.chargeable_days} days",
        f"Charge before discount: {format_currency(agreement.pre_discount_price)}",
        f"Discount rate: {agreement.discount_percent}%",
        f"Total discount: {format_currency(agreement.discount_amount)}",
        f"Final charge: {format_currency(agreement.final_price)}",
    ]
    return "\n".join(lines) + "\n"
