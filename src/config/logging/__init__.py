"""Logging estruturado JSON.

Campos presentes em todo log: timestamp, level, logger, message,
service e correlation_id.
"""

from config.logging.config import configure_logging, get_logger, set_log_level
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "set_log_level",
]
