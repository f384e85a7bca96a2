"""Logging estruturado JSON.

Campos em todo log: asctime, level, logger, message, correlation_id, service.
Credenciais configuradas são mascaradas antes da formatação.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging
from config.logging.filters import REDACTED, CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import FIELD_RENAME_MAP, LOG_FIELDS, create_json_formatter

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "REDACTED",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
]
