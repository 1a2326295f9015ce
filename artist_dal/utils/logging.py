"""
Logging utilities for the artist data access layer.

This module provides centralized logging configuration and structured
event logging so failed database operations can be found and parsed in
application logs.
"""

import json
import logging
import time
from typing import Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("psycopg").setLevel(logging.WARNING)  # Reduce driver noise
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)  # Reduce pool noise


def log_operation_failure(
    operation: str,
    error_type: str,
    stage: str,
    error_message: str,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for a database operation that failed.

    The caller receives a fallback value instead of an exception, so this
    record is what remains of the failure.

    Args:
        operation: Name of the data access operation
        error_type: Classification ("permanent", "transient", "systemic")
        stage: Where the failure happened ("connect" or "execute")
        error_message: Description of the error that occurred
        timestamp: Failure timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    failure_record = {
        "event_type": "operation_failure",
        "timestamp": timestamp,
        "operation": operation,
        "error_type": error_type,
        "stage": stage,
        "error_message": error_message,
        "success": False
    }

    logger.warning(f"OPERATION_FAILURE: {json.dumps(failure_record, ensure_ascii=False)}")


def log_operation_rows(operation: str, rows, logger: Optional[logging.Logger] = None):
    """Log fetched rows at DEBUG level."""
    if logger is None:
        logger = logging.getLogger(__name__)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{operation}: {len(rows)} row(s) {json.dumps(rows, default=str, ensure_ascii=False)}")
