"""Boot loaders canônicos: ambiente, configuração e função arbitrária.

A ordem na cadeia define a precedência: o EnvBootLoader deve vir antes do
ConfigBootLoader para que ``${VAR}`` nos arquivos de config resolva.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from app.events import CONFIG_AFTER, CONFIG_BEFORE, ConfigAfterPayload, ConfigBeforePayload
from app.protocols.boot_loader import BootLoader
from config.env import DEFAULT_ENV_FILE, load_env_exists
from config.settings import DEFAULT_FLAGS

if TYPE_CHECKING:
    from app.application import Application

logger = logging.getLogger(__name__)


class EnvBootLoader(BootLoader):
    """Carrega arquivos de ambiente de ``directory`` em ``os.environ``.

    Arquivos ausentes são ignorados; arquivo malformado aborta o boot
    com EnvFileError.
    """

    name = "env"

    def __init__(
        self,
        directory: str = ".",
        files: Iterable[str] = (DEFAULT_ENV_FILE,),
        override: bool = False,
    ) -> None:
        self._directory = directory
        self._files = tuple(files)
        self._override = override

    def apply(self, app: Application) -> None:
        loaded = load_env_exists(self._directory, *self._files, override=self._override)
        logger.info(
            "env_files_loaded",
            extra={"directory": self._directory, "loaded": loaded, "app_name": app.name},
        )


class ConfigBootLoader(BootLoader):
    """Popula o config store a partir de arquivos e flags de CLI.

    Sequência:
        1. dispara config.before com a lista de arquivos e o store
        2. carrega os arquivos existentes da lista (já mutada pelos listeners)
        3. mescla as flags da allow-list, que vencem os arquivos
        4. dispara config.after com o store populado

    Falha em 2 ou 3 é levantada e config.after não é disparado.
    """

    name = "config"

    def __init__(
        self,
        files: Iterable[str],
        flags: Iterable[str] = DEFAULT_FLAGS,
        argv: Sequence[str] | None = None,
    ) -> None:
        self._files = tuple(files)
        self._flags = tuple(flags)
        self._argv = argv

    @property
    def files(self) -> tuple[str, ...]:
        return self._files

    def apply(self, app: Application) -> None:
        before = ConfigBeforePayload(files=list(self._files), config=app.config)
        app.events.must_fire(CONFIG_BEFORE, before)

        logger.info("config_loading", extra={"files": before.files})
        loaded = app.config.load_exists(*before.files)
        flags = app.config.load_flags(self._flags, self._argv)
        logger.info(
            "config_loaded",
            extra={"loaded": loaded, "flags": sorted(flags)},
        )

        app.events.must_fire(CONFIG_AFTER, ConfigAfterPayload(config=app.config))


class FuncBootLoader(BootLoader):
    """Adapta um callable ``func(app)`` para a cadeia de boot."""

    def __init__(self, func: Callable[[Application], None], name: str | None = None) -> None:
        if not callable(func):
            raise TypeError("func deve ser callable")
        self._func = func
        self.name = name or getattr(func, "__name__", None) or "func"

    def apply(self, app: Application) -> None:
        self._func(app)
