"""Carga de arquivos de ambiente (.env) com verificação de existência.

Arquivo ausente é ignorado; arquivo presente com linha que não é
interpretável levanta EnvFileError. Entre arquivos, o posterior vence nas
chaves em comum; variáveis que já existiam no processo antes da carga são
preservadas, salvo ``override``. Quoting e interpolação ``${VAR}`` seguem o
python-dotenv.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection
from pathlib import Path

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from utils.errors import EnvFileError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def load_env_file(
    path: str | Path,
    override: bool = False,
    protected: Collection[str] | None = None,
) -> dict[str, str]:
    """Carrega um arquivo existente em ``os.environ``.

    Args:
        path: Arquivo a carregar (deve existir).
        override: Se True, sobrescreve inclusive as variáveis protegidas.
        protected: Variáveis que o arquivo não pode sobrescrever; ``None``
            protege tudo que já está em ``os.environ``.

    Returns:
        Variáveis efetivamente aplicadas.

    Raises:
        EnvFileError: Arquivo ilegível ou com linha malformada.
    """
    env_path = Path(path)
    try:
        with env_path.open(encoding="utf-8") as stream:
            for binding in parse_stream(stream):
                if binding.error:
                    raise EnvFileError(
                        str(env_path),
                        binding.original.line,
                        f"linha não interpretável: {binding.original.string.strip()!r}",
                    )
        values = dotenv_values(env_path, interpolate=True)
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileError(str(env_path), None, str(exc)) from exc

    if protected is None:
        protected = frozenset(os.environ)

    applied: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if not override and key in protected:
            continue
        os.environ[key] = value
        applied[key] = value
    return applied


def load_env_exists(
    directory: str | Path,
    *files: str,
    override: bool = False,
) -> list[str]:
    """Carrega, em ordem, os arquivos de ``directory`` que existirem.

    Sem ``files`` procura apenas ``.env``. O processo é fotografado antes
    do primeiro arquivo, então ``.env.local`` depois de ``.env`` sobrescreve
    as chaves em comum.

    Returns:
        Paths carregados.
    """
    base = Path(directory)
    protected = frozenset(os.environ)
    loaded: list[str] = []
    for name in files or (DEFAULT_ENV_FILE,):
        path = base / name
        if not path.is_file():
            logger.debug("env_file_skipped", extra={"path": str(path)})
            continue
        applied = load_env_file(path, override=override, protected=protected)
        loaded.append(str(path))
        logger.debug("env_file_loaded", extra={"path": str(path), "vars": len(applied)})
    return loaded
