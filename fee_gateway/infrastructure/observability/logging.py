"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from fee_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.utcnow().isoformat()
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


def log_receipt(
    request_id: str,
    receipt_no: str,
    days_late: int,
    fine_amount: Decimal,
    total_amount: Decimal,
) -> None:
    """Log structured receipt outcome for fine auditing"""
    logging.info(
        "Receipt computed",
        extra={
            "request_id": request_id,
            "receipt_no": receipt_no,
            "step": "receipt_complete",
            "days_late": days_late,
            "fine_amount": str(fine_amount),
            "total_amount": str(total_amount),
        },
    )
