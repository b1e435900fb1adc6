"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import List

from tool_rental.domain.models import RentalAgreement, Tool


class CheckoutRequest(BaseModel):
    """Request body for POST /v1/checkout"""

    # Range rules live in the domain so every caller gets the same errors
    tool_code: str = Field(..., description="Catalog tool code, e.g. LADW")
    checkout_date: date = Field(..., description="Day the tool is picked up (not billed)")
    rental_duration: int = Field(..., description="Number of rental days, 1 or more")
    discount_percent: int = Field(0, description="Whole-number discount, 0-100")


class ToolTypeSchema(BaseModel):
    """Tool type and its charge policy"""

    name: str
    daily_charge: Decimal
    has_weekday_charge: bool
    has_weekend_charge: bool
    has_holiday_charge: bool


class ToolResponse(BaseModel):
    """Response for GET /v1/tools/{tool_code}"""

    tool_code: str
    brand_name: str
    tool_type: ToolTypeSchema

    @classmethod
    def from_tool(cls, tool: Tool) -> "ToolResponse":
        return cls(
            tool_code=tool.tool_code,
            brand_name=tool.brand_name,
            tool_type=ToolTypeSchema(
                name=tool.tool_type.name,
                daily_charge=tool.tool_type.daily_charge,
                has_weekday_charge=tool.tool_type.has_weekday_charge,
                has_weekend_charge=tool.tool_type.has_weekend_charge,
                has_holiday_charge=tool.tool_type.has_holiday_charge,
            ),
        )


class ToolListResponse(BaseModel):
    """Response for GET /v1/tools"""

    tools: List[ToolResponse]


class RentalAgreementResponse(BaseModel):
    """Response for POST /v1/checkout"""

    tool_code: str
    tool_type: str
    brand_name: str
    checkout_date: date
    rental_duration: int
    due_date: date
    daily_charge: Decimal
    chargeable_days: int
    pre_discount_price: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_price: Decimal

    @classmethod
    def from_agreement(cls, agreement: RentalAgreement) -> "RentalAgreementResponse":
        return cls(
            tool_code=agreement.tool.tool_code,
            tool_type=agreement.tool.tool_type.name,
            brand_name=agreement.tool.brand_name,
            checkout_date=agreement.checkout_date,
            rental_duration=agreement.rental_duration,
            due_date=agreement.rental_due_date,
            daily_charge=agreement.tool.tool_type.daily_charge,
            chargeable_days=agreement.chargeable_days,
            pre_discount_price=agreement.pre_discount_price,
            discount_percent=agreement.discount_percent,
            discount_amount=agreement.discount_amount,
            final_price=agreement.final_price,
        )
