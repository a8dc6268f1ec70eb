"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_simulator.config import settings


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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_simulation(
    request_id: str,
    product_code: int,
    principal: Decimal,
    term: int,
    duration_ms: float,
) -> None:
    """Log structured simulation outcome for analysis"""
    logging.info(
        "Simulation completed",
        extra={
            "request_id": request_id,
            "step": "simulation_complete",
            "product_code": product_code,
            "principal": str(principal),
            "term": term,
            "duration_ms": duration_ms,
        },
    )


def log_no_compatible_product(request_id: str, principal: Decimal, term: int) -> None:
    """No product admitted the request; a business outcome, not a failure"""
    logging.warning(
        "No compatible product",
        extra={
            "request_id": request_id,
            "step": "product_match",
            "principal": str(principal),
            "term": term,
        },
    )
