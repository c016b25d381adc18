"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from card_billing.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_plan_built(
    request_id: str,
    card_id: str | None,
    num_installments: int,
    total: str,
    first_reference_month: str,
    duration_ms: float,
) -> None:
    """Log structured plan outcome for auditing"""
    logging.info(
        "Installment plan built",
        extra={
            "request_id": request_id,
            "card_id": card_id,
            "step": "plan_built",
            "num_installments": num_installments,
            "total": total,
            "first_reference_month": first_reference_month,
            "duration_ms": duration_ms,
        },
    )


def log_invoice_computed(
    request_id: str,
    reference_month: str,
    num_cards: int,
    total: str,
    duration_ms: float,
) -> None:
    """Log structured invoice aggregation outcome"""
    logging.info(
        "Invoice computed",
        extra={
            "request_id": request_id,
            "step": "invoice_computed",
            "reference_month": reference_month,
            "num_cards": num_cards,
            "total": total,
            "duration_ms": duration_ms,
        },
    )
