"""POST /v1/checkout - Price a tool rental"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from tool_rental.api.v1.schemas import CheckoutRequest, RentalAgreementResponse
from tool_rental.api.dependencies import get_checkout, get_request_id
from tool_rental.domain.checkout import Checkout
from tool_rental.domain.exceptions import RentalValidationError, UnknownToolCodeError
from tool_rental.domain.models import RentalAgreement
from tool_rental.infrastructure.observability.metrics import record_checkout, record_checkout_failure
from tool_rental.infrastructure.observability.logging import log_checkout
from tool_rental.utils.formatting import render_agreement

router = APIRouter()


def price_checkout(request_body: CheckoutRequest, request: Request, checkout: Checkout) -> RentalAgreement:
    """
    Run a checkout and translate domain errors to HTTP errors.

    - Unknown tool code -> 404
    - Validation failure (duration, discount, missing field) -> 422
    - Anything else -> 500
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        agreement = checkout.checkout(
            tool_code=request_body.tool_code,
            checkout_date=request_body.checkout_date,
            rental_duration=request_body.rental_duration,
            discount_percent=request_body.discount_percent,
        )

    except UnknownToolCodeError as e:
        record_checkout_failure("unknown_tool")
        logging.warning(f"Unknown tool code: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except RentalValidationError as e:
        record_checkout_failure("invalid_request")
        logging.warning(f"Invalid checkout: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        record_checkout_failure("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_checkout(agreement)
    log_checkout(request_id, agreement.tool.tool_code, agreement.chargeable_days, agreement.final_price, duration_ms)

    return agreement


@router.post("/checkout", response_model=RentalAgreementResponse)
def create_checkout(
    request_body: CheckoutRequest,
    request: Request,
    checkout: Checkout = Depends(get_checkout),
):
    """
    Price a rental and return the agreement.

    Chargeable days start the day after checkout_date; holidays are the
    observed Independence Day and Labor Day.
    """
    agreement = price_checkout(request_body, request, checkout)
    return RentalAgreementResponse.from_agreement(agreement)


@router.post("/checkout/print", response_class=PlainTextResponse)
def print_checkout(
    request_body: CheckoutRequest,
    request: Request,
    checkout: Checkout = Depends(get_checkout),
):
    """Price a rental and return the printable agreement text"""
    agreement = price_checkout(request_body, request, checkout)
    return PlainTextResponse(render_agreement(agreement))
