"""Bootstrap — composition root do appboot.

Configura logging, valida settings e monta a Application com a cadeia de
boot padrão.

Uso:
    from app.bootstrap import create_application, initialize_logging

    settings = get_app_settings()
    initialize_logging(settings)
    application = create_application(settings)
    application.run()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from api.routes import create_api_router
from app.application import Application
from app.boot import ConfigBootLoader, EnvBootLoader
from app.events import APP_BOOTED, AppPayload
from app.observability import get_correlation_id
from app.protocols import BootLoader, ServerProtocol
from config.logging import configure_logging, set_log_level
from config.settings import AppSettings, get_app_settings
from utils.errors import ConfigError

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_logging(settings: AppSettings | None = None) -> None:
    """Instala o logging JSON conforme as settings.

    Deve ser chamada uma vez no início do processo, antes do boot.
    """
    settings = settings or get_app_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: AppSettings | None = None) -> None:
    """Valida as settings no startup.

    Em ``staging``/``production`` falha rápido; em ``development`` apenas
    registra o problema.

    Raises:
        ConfigError: Settings inválidas em ambiente estrito.
    """
    settings = settings or get_app_settings()
    errors = settings.validate()
    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if settings.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigError(f"Configuração inválida para {settings.environment}:\n{details}")


def build_boot_loaders(
    settings: AppSettings,
    argv: Sequence[str] | None = None,
) -> list[BootLoader]:
    """Cadeia padrão: ambiente antes de config, para que ${VAR} resolva."""
    return [
        EnvBootLoader(settings.env_dir, settings.env_files),
        ConfigBootLoader(settings.config_files, flags=settings.flags, argv=argv),
    ]


def enable_debug_logging(payload: AppPayload) -> None:
    """Listener de app.booted: ``debug`` verdadeiro na config liga DEBUG."""
    if payload.app.config.bool("debug"):
        set_log_level("DEBUG")
        logger.debug("debug_logging_enabled", extra={"app_name": payload.app.name})


def create_application(
    settings: AppSettings | None = None,
    argv: Sequence[str] | None = None,
    server: ServerProtocol | None = None,
) -> Application:
    """Monta a Application com loaders, rotas do container e listeners padrão.

    Args:
        settings: Settings de runtime (default: do ambiente).
        argv: Argumentos de CLI para as flags (default: ``sys.argv[1:]``).
        server: Colaborador de serving (default: uvicorn).
    """
    settings = settings or get_app_settings()
    application = Application(
        loaders=build_boot_loaders(settings, argv),
        server=server,
    )
    application.router.include_router(create_api_router())
    application.on(APP_BOOTED, enable_debug_logging)
    return application
