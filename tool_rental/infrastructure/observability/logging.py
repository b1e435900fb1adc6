"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from tool_rental.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_checkout(
    request_id: str,
    tool_code: str,
    chargeable_days: int,
    final_price: Decimal,
    duration_ms: float,
) -> None:
    """Log structured checkout outcome for analysis"""
    logging.info(
        "Checkout completed",
        extra={
            "request_id": request_id,
            "tool_code": tool_code,
            "step": "checkout_complete",
            "chargeable_days": chargeable_days,
            "final_price": str(final_price),
            "duration_ms": duration_ms,
        },
    )
