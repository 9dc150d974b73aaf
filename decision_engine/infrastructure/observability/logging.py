"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from decision_engine.domain.models import DecisionResult


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "decision-engine", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "decision-engine") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(
    request_id: str,
    personal_code: str,
    result: DecisionResult,
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.info(
        "Decision completed",
        extra={
            "request_id": request_id,
            "personal_code": personal_code,
            "step": "decision_complete",
            "approval_outcome": "approved" if result.is_approved else "rejected",
            "approved_amount": result.approved_amount,
            "approved_period": result.approved_period,
            "error_kind": result.error_kind,
            "duration_ms": duration_ms,
        },
    )
