"""Settings de runtime do container.

Lidas de variáveis de ambiente antes do boot; dizem ao entrypoint onde
estão os arquivos .env e de configuração e quais flags de CLI aceitar.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_ENV_FILES = (".env",)
DEFAULT_CONFIG_FILES = ("config/app.yaml", "config/app.local.yaml")
DEFAULT_FLAGS = ("debug:bool",)


@dataclass(frozen=True)
class AppSettings:
    """Configuração de bootstrap do processo.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço nos logs
        log_level: Nível inicial de log
        env_dir: Diretório onde procurar arquivos de ambiente
        env_files: Nomes dos arquivos de ambiente, em ordem
        config_files: Arquivos de config, em ordem de precedência crescente
        flags: Allow-list de flags de CLI mescladas na config
    """

    environment: Environment = "development"
    service_name: str = "appboot"
    log_level: str = "INFO"
    env_dir: str = "."
    env_files: tuple[str, ...] = field(default=DEFAULT_ENV_FILES)
    config_files: tuple[str, ...] = field(default=DEFAULT_CONFIG_FILES)
    flags: tuple[str, ...] = field(default=DEFAULT_FLAGS)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida as settings.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if not self.config_files:
            errors.append("APPBOOT_CONFIG_FILES não pode ser vazio")

        for flag in self.flags:
            _, _, kind = flag.partition(":")
            if kind and kind not in {"str", "bool", "int", "float"}:
                errors.append(f"APPBOOT_FLAGS: tipo inválido em '{flag}'")

        return errors


def _parse_environment(env_str: str) -> Environment:
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_list(raw: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Converte lista separada por vírgula; ausente ou vazia usa o default."""
    if not raw:
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


def _load_app_settings_from_env() -> AppSettings:
    return AppSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "appboot"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        env_dir=os.getenv("APPBOOT_ENV_DIR", "."),
        env_files=_parse_list(os.getenv("APPBOOT_ENV_FILES"), DEFAULT_ENV_FILES),
        config_files=_parse_list(os.getenv("APPBOOT_CONFIG_FILES"), DEFAULT_CONFIG_FILES),
        flags=_parse_list(os.getenv("APPBOOT_FLAGS"), DEFAULT_FLAGS),
    )


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Retorna instância cacheada de AppSettings."""
    return _load_app_settings_from_env()
