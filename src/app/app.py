"""Entrypoint do appboot.

Uso (CLI):
    appboot --debug

Uso (uvicorn, factory):
    uvicorn app.app:create_asgi_app --factory --host 0.0.0.0 --port 8080

O processo é dono da Application; nenhum módulo guarda instância global.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from fastapi import FastAPI

from app.bootstrap import create_application, initialize_logging, validate_runtime_settings
from config.settings import get_app_settings
from utils.errors import AppError

logger = logging.getLogger(__name__)


def create_asgi_app() -> FastAPI:
    """Factory para ``uvicorn --factory``: devolve a aplicação já bootada.

    Raises:
        BootError: Boot falhou; o uvicorn não chega a servir.
    """
    settings = get_app_settings()
    initialize_logging(settings)
    validate_runtime_settings(settings)

    application = create_application(settings, argv=[])
    application.boot()
    return application.asgi


def main(argv: Sequence[str] | None = None) -> int:
    """Boota e serve; devolve o exit code do processo."""
    settings = get_app_settings()
    initialize_logging(settings)

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_runtime_settings(settings)
        application = create_application(settings, argv=args)
        application.run()
    except AppError as exc:
        logger.critical(
            "app_startup_aborted",
            extra={"error_type": type(exc).__name__, "error": str(exc)},
        )
        return 1
    except ValueError as exc:
        logger.critical("app_listen_address_invalid", extra={"error": str(exc)})
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
