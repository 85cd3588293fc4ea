"""
Logging Configuration

Structured logging shared by the tax engine, checkout and ledger modules:
- One-line records that are easy to grep in order/ledger logs
- Optional order context appended to each record
- Environment-based levels (LOG_LEVEL)
- Timing helper for batch reconciliation runs
"""

import logging
import sys
import time
from pathlib import Path
from datetime import datetime
from typing import Optional
import os


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter.

    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {order_context}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        line = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        # Passed as logger.info(..., extra={"order_context": {...}})
        order_context = getattr(record, 'order_context', None)
        if order_context:
            line += f" {order_context}"

        return line


class PerformanceLogger:
    """Context manager that logs how long an operation took."""

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 1000):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.started_at = None
        self.duration_ms = None

    def __enter__(self):
        self.started_at = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.started_at is None:
            return

        self.duration_ms = (time.perf_counter() - self.started_at) * 1000
        if self.duration_ms > self.threshold_ms:
            self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms")
        else:
            self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO
        log_file: Optional file path, e.g. for a reconciliation audit trail

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier import
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 1000):
    """
    Get a performance logger context manager.

    Usage:
        with get_perf_logger(logger, "reconcile ledger", threshold_ms=500):
            mismatches = reconcile(frame)
    """
    return PerformanceLogger(logger, operation, threshold_ms)


def log_dataframe_info(logger: logging.Logger, df, name: str = "DataFrame"):
    """Log row/column counts of a pandas DataFrame (and warn when it is large)."""
    if df is None:
        logger.warning(f"{name} is None")
        return

    if df.empty:
        logger.info(f"{name} is empty (0 rows)")
        return

    logger.info(f"{name}: {len(df)} rows, {len(df.columns)} columns")

    memory_mb = df.memory_usage(deep=True).sum() / 1024 / 1024
    if memory_mb > 10:
        logger.warning(f"{name} using {memory_mb:.1f}MB memory")
