"""Filter que injeta contexto (service, correlation_id) nos records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece cada record com ``service`` e ``correlation_id``.

    Durante o boot não há requisição em curso e o correlation_id fica vazio;
    dentro do DispatchShim ele vem do ContextVar da requisição.

    Args:
        service_name: Nome do serviço gravado em todo record.
        correlation_id_getter: Função que lê o correlation_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` tem precedência
        explicit = getattr(record, "correlation_id", None)
        record.correlation_id = explicit or self._get_correlation_id()
        record.service = self._service_name
        return True
