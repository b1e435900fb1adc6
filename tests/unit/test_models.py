"""Unit tests for rental agreement construction and pricing"""

import pytest
from datetime import date
from decimal import Decimal
from dataclasses import FrozenInstanceError
from tool_rental.domain.models import RentalAgreement, Tool, ToolType
from tool_rental.domain.pricing import calculate_rental_price, round_cents
from tool_rental.domain.exceptions import (
    DiscountOutOfRangeError,
    InvalidDailyChargeError,
    InvalidRentalDurationError,
    NegativeChargeableDaysError,
    RentalPeriodOutOfRangeError,
    RequiredFieldMissingError,
)


def test_round_cents_half_up():
    assert round_cents(Decimal("1.495")) == Decimal("1.50")
    assert round_cents(Decimal("1.1175")) == Decimal("1.12")
    assert round_cents(Decimal("0.398")) == Decimal("0.40")
    assert round_cents(Decimal("2.005")) == Decimal("2.01")


def test_calculate_rental_price_rounds_each_step():
    """Discount is taken from the already-rounded pre-discount price"""
    price = calculate_rental_price(Decimal("1.49"), 3, 25)

    assert price.pre_discount_price == Decimal("4.47")
    assert price.discount_amount == Decimal("1.12")
    assert price.final_price == Decimal("3.35")


def test_calculate_rental_price_final_is_exact_difference():
    for discount in range(0, 101):
        price = calculate_rental_price(Decimal("2.99"), 7, discount)
        assert price.final_price == price.pre_discount_price - price.discount_amount


def test_calculate_rental_price_full_discount():
    price = calculate_rental_price(Decimal("1.99"), 4, 100)

    assert price.discount_amount == Decimal("7.96")
    assert price.final_price == Decimal("0.00")


def test_agreement_computes_prices_and_due_date(ladder_tool):
    agreement = RentalAgreement(ladder_tool, 3, date(2020, 7, 2), 2, 10)

    assert agreement.pre_discount_price == Decimal("3.98")
    assert agreement.discount_amount == Decimal("0.40")
    assert agreement.final_price == Decimal("3.58")
    assert agreement.rental_due_date == date(2020, 7, 5)


def test_agreement_zero_chargeable_days(ladder_tool):
    agreement = RentalAgreement(ladder_tool, 1, date(2020, 7, 2), 0, 50)

    assert agreement.pre_discount_price == Decimal("0.00")
    assert agreement.final_price == Decimal("0.00")


def test_agreement_is_immutable(ladder_tool):
    agreement = RentalAgreement(ladder_tool, 3, date(2020, 7, 2), 2, 10)

    with pytest.raises(FrozenInstanceError):
        agreement.final_price = Decimal("0.00")


def test_agreement_requires_tool():
    with pytest.raises(RequiredFieldMissingError) as exc_info:
        RentalAgreement(None, 5, date(2020, 7, 2), 0, 0)
    assert exc_info.value.field_name == "tool"


def test_agreement_requires_checkout_date(ladder_tool):
    with pytest.raises(RequiredFieldMissingError) as exc_info:
        RentalAgreement(ladder_tool, 5, None, 0, 0)
    assert exc_info.value.field_name == "checkout_date"


@pytest.mark.parametrize("duration", [0, -1])
def test_agreement_rejects_invalid_duration(ladder_tool, duration):
    with pytest.raises(InvalidRentalDurationError) as exc_info:
        RentalAgreement(ladder_tool, duration, date(2020, 7, 2), 0, 0)
    assert exc_info.value.value == duration
    assert str(duration) in str(exc_info.value)


@pytest.mark.parametrize("discount", [-1, 101])
def test_agreement_rejects_discount_out_of_range(ladder_tool, discount):
    with pytest.raises(DiscountOutOfRangeError) as exc_info:
        RentalAgreement(ladder_tool, 5, date(2020, 7, 2), 3, discount)
    assert exc_info.value.value == discount
    assert str(discount) in str(exc_info.value)


def test_agreement_rejects_negative_chargeable_days(ladder_tool):
    with pytest.raises(NegativeChargeableDaysError) as exc_info:
        RentalAgreement(ladder_tool, 5, date(2020, 7, 2), -1, 0)
    assert exc_info.value.value == -1


def test_agreement_validation_order(ladder_tool):
    """Duration is checked before discount, discount before chargeable days"""
    with pytest.raises(InvalidRentalDurationError):
        RentalAgreement(ladder_tool, 0, date(2020, 7, 2), -1, 101)

    with pytest.raises(DiscountOutOfRangeError):
        RentalAgreement(ladder_tool, 1, date(2020, 7, 2), -1, 101)


def test_agreement_does_not_cap_chargeable_days(ladder_tool):
    """Upper bound is the caller's job; the agreement prices what it is given"""
    agreement = RentalAgreement(ladder_tool, 1, date(2020, 7, 2), 3, 0)

    assert agreement.pre_discount_price == Decimal("5.97")


def test_tool_type_requires_name_and_charge():
    with pytest.raises(RequiredFieldMissingError):
        ToolType(None, Decimal("9.99"), True, True, True)

    with pytest.raises(RequiredFieldMissingError):
        ToolType("Fake", None, True, True, True)


def test_tool_type_rejects_negative_charge():
    with pytest.raises(InvalidDailyChargeError):
        ToolType("Fake", Decimal("-0.01"), True, True, True)


def test_tool_type_converts_charge_to_decimal():
    tool_type = ToolType("Fake", 1.99, True, True, True)

    assert tool_type.daily_charge == Decimal("1.99")


def test_tool_type_value_equality():
    assert ToolType("Fake", Decimal("1.99"), True, False, True) == ToolType("Fake", Decimal("1.99"), True, False, True)
    assert ToolType("Fake", Decimal("1.99"), True, False, True) != ToolType("Fake", Decimal("1.99"), True, True, True)


@pytest.mark.parametrize(
    "tool_code, has_type, brand_name, missing",
    [
        (None, True, "Fake", "tool_code"),
        ("", True, "Fake", "tool_code"),
        ("FAKE", False, "Fake", "tool_type"),
        ("FAKE", True, None, "brand_name"),
    ],
)
def test_tool_requires_all_fields(ladder, tool_code, has_type, brand_name, missing):
    with pytest.raises(RequiredFieldMissingError) as exc_info:
        Tool(tool_code, ladder if has_type else None, brand_name)
    assert exc_info.value.field_name == missing


def test_agreement_due_date_past_last_calendar_day(ladder_tool):
    """A period ending after date.max is a validation error, not an OverflowError"""
    with pytest.raises(RentalPeriodOutOfRangeError) as exc_info:
        RentalAgreement(ladder_tool, 5, date(9999, 12, 30), 0, 0)
    assert exc_info.value.rental_duration == 5
    assert exc_info.value.checkout_date == date(9999, 12, 30)
    assert isinstance(exc_info.value.__cause__, OverflowError)


def test_agreement_due_date_on_last_calendar_day(ladder_tool):
    agreement = RentalAgreement(ladder_tool, 1, date(9999, 12, 30), 1, 0)

    assert agreement.rental_due_date == date(9999, 12, 31)
