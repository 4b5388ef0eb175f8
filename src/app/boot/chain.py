"""Execução ordenada da cadeia de boot loaders."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from utils.errors import BootLoaderError

if TYPE_CHECKING:
    from app.application import Application
    from app.protocols.boot_loader import BootLoader

logger = logging.getLogger(__name__)


def run_boot_chain(app: Application, loaders: Iterable[BootLoader]) -> int:
    """Aplica ``loaders`` na ordem dada.

    A primeira falha interrompe a cadeia; o estado mutado pelos loaders
    anteriores permanece (não há rollback).

    Args:
        app: Aplicação em BOOTING.
        loaders: Loaders na ordem definida pelo chamador.

    Returns:
        Quantidade de loaders aplicados.

    Raises:
        BootLoaderError: Loader que falhou, com a exceção original em
            ``__cause__``.
    """
    applied = 0
    for position, loader in enumerate(loaders):
        started_at = time.perf_counter()
        try:
            loader.apply(app)
        except Exception as exc:
            logger.error(
                "boot_loader_failed",
                extra={
                    "loader": loader.name,
                    "position": position,
                    "error_type": type(exc).__name__,
                },
            )
            raise BootLoaderError(loader.name, str(exc) or type(exc).__name__) from exc

        applied += 1
        logger.info(
            "boot_loader_applied",
            extra={
                "loader": loader.name,
                "position": position,
                "elapsed_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
    return applied
