"""Structured logging configuration."""

import logging
import sys

from criterion.core.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Evaluation context attached through ``extra=``
        for key in ("decision_id", "rule_id", "status", "trace_id"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging(level: str | None = None) -> None:
    """Configure logging for a host process.

    Args:
        level: Overrides ``settings.log_level`` when given
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Hypothesis is chatty at DEBUG when fuzzing
    logging.getLogger("hypothesis").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class AuditLogger:
    """Logger for collected decision traces."""

    def __init__(self) -> None:
        self.logger = get_logger("criterion.audit")

    def log(
        self,
        decision_id: str,
        status: str,
        matched_rule: str | None,
        duration_ms: float,
        trace_id: str | None = None,
    ) -> None:
        """Log one evaluation."""
        self.logger.info(
            f"AUDIT: decision={decision_id} status={status} "
            f"rule={matched_rule or 'none'} duration_ms={duration_ms:.2f}",
            extra={"decision_id": decision_id, "status": status, "trace_id": trace_id},
        )


audit_logger = AuditLogger()
