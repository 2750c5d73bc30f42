"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from bizbooks.config import settings


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


def log_transaction_event(
    request_id: str,
    action: str,
    transaction_id: int,
    transaction_type: Optional[str] = None,
) -> None:
    """Log a create/update/delete against the ledger"""
    logging.info(
        f"Transaction {action}",
        extra={
            "request_id": request_id,
            "step": f"transaction_{action}",
            "transaction_id": transaction_id,
            "transaction_type": transaction_type,
        },
    )


def log_report_generated(
    request_id: str,
    report: str,
    record_count: int,
    duration_ms: float,
) -> None:
    """Log structured report outcome for analysis"""
    logging.info(
        "Report generated",
        extra={
            "request_id": request_id,
            "step": "report_complete",
            "report": report,
            "record_count": record_count,
            "duration_ms": duration_ms,
        },
    )
