"""Formatter JSON dos logs do serviço.

Campos presentes em todo record: asctime, level, logger, message,
correlation_id e service. Campos passados via `extra` são anexados.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os nomes de campo padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.connectors.steadfast...",
         "message": "webhook_processed", "correlation_id": "abc", "service": "steadfast"}
    """
    format_string = " ".join(f"%({name})s" for name in LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
