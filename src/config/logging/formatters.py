"""Formatter JSON dos logs do container.

Todo record sai como um objeto JSON com os campos de REQUIRED_LOG_FIELDS,
renomeados conforme FIELD_RENAME_MAP.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável facilita leitura em terminal e grep em agregadores
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos padronizados.

    Campos passados via ``extra`` são anexados ao objeto automaticamente.

    Exemplo de output:
        {"timestamp": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "app.application", "message": "app_booted",
         "service": "appboot", "correlation_id": "", "app_name": "demo"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
