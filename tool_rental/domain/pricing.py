"""Rental price derivation with fixed-point cents rounding"""

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)


class RentalPrice(NamedTuple):
    pre_discount_price: Decimal
    discount_amount: Decimal
    final_price: Decimal


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to 2 fractional digits"""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_rental_price(daily_charge: Decimal, chargeable_days: int, discount_percent: int) -> RentalPrice:
    """
    Derive the three agreement prices.

    Each value is rounded on its own, so final_price is always exactly
    pre_discount_price - discount_amount.

    Example:
        $1.49 x 3 days, 25% off
        pre-discount: 4.47
        discount:     4.47 x 0.25 = 1.1175 -> 1.12
        final:        4.47 - 1.12 = 3.35
    """
    pre_discount_price = round_cents(daily_charge * chargeable_days)

    # Integer percent / 100 is exact in Decimal, no rounding here
    discount_fraction = Decimal(discount_percent) / HUNDRED
    discount_amount = round_cents(pre_discount_price * discount_fraction)

    final_price = round_cents(pre_discount_price - discount_amount)

    return RentalPrice(pre_discount_price, discount_amount, final_price)
