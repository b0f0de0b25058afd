"""Logging estruturado em JSON (python-json-logger).

Todo record sai com asctime, level, logger, message, service e
correlation_id; credenciais em `extra` são mascaradas.

    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="clinic_shell")
    logging.getLogger(__name__).info("theme_applied", extra={"theme": "dark"})
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    REDACTED,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    RedactSensitiveFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    "CorrelationIdFilter",
    "RedactSensitiveFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
