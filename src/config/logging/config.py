"""Configuração centralizada de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # No entrypoint, antes do boot
    configure_logging(level="INFO", service_name="appboot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("boot_loader_applied", extra={"loader": "env"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "appboot"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Pode ser chamada de novo (ex: ao ativar ``debug`` após o boot); os
    handlers anteriores são substituídos, nunca acumulados.

    Args:
        level: Nível de log (case insensitive).
        service_name: Nome do serviço injetado em todo record.
        correlation_id_getter: Função que retorna o correlation_id corrente.

    Raises:
        ValueError: Se o nível for desconhecido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def set_log_level(level: str) -> None:
    """Ajusta o nível do root logger e de seus handlers sem reinstalá-los."""
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(f"Nível de log inválido: {level}")
    root = logging.getLogger()
    root.setLevel(level_upper)
    for handler in root.handlers:
        handler.setLevel(level_upper)


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (service/correlation_id vêm do filter)."""
    return logging.getLogger(name)
