"""Config store em camadas.

Camadas são aplicadas na ordem em que chegam: arquivos (na ordem dada) e
depois flags de linha de comando. Cada camada sobrescreve apenas as chaves
que define; mapeamentos aninhados são mesclados recursivamente.

Após o boot o store é travado (``lock``) e vira somente leitura, o que
permite leituras concorrentes sem sincronização.

Uso:
    store = ConfigStore()
    store.load_exists("config/app.yaml", "config/app.local.yaml")
    store.load_flags(["debug:bool"])
    store.string("listen", "")
    store.get("server.port", 8080)
"""

from __future__ import annotations

import copy
import logging
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from config.store.flags import parse_bool, parse_flags
from config.store.sources import expand_env, read_config_file
from utils.errors import ConfigError, ConfigLockedError

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigStore:
    """Armazenamento chave/valor com chaves pontuadas (``a.b.c``)."""

    def __init__(self, name: str = "app", data: Mapping[str, Any] | None = None) -> None:
        self._name = name
        self._data: dict[str, Any] = {}
        self._sources: list[str] = []
        self._locked = False
        if data:
            self.load_data(data, source="defaults")

    @property
    def name(self) -> str:
        return self._name

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def sources(self) -> list[str]:
        """Camadas aplicadas, em ordem (paths, ``flags`` ou rótulos)."""
        return list(self._sources)

    # ──────────────────────────────────────────────────────────────────────
    # Escrita
    # ──────────────────────────────────────────────────────────────────────

    def load_exists(self, *paths: str | Path) -> list[str]:
        """Carrega os arquivos existentes, ignorando os ausentes.

        Returns:
            Paths efetivamente carregados, em ordem.

        Raises:
            ConfigLoadError: Arquivo presente porém malformado.
            ConfigLockedError: Store já travado.
        """
        self._ensure_writable()
        loaded: list[str] = []
        for raw_path in paths:
            if not raw_path:
                continue
            path = Path(raw_path)
            if not path.is_file():
                logger.debug("config_file_skipped", extra={"path": str(path)})
                continue
            data = expand_env(read_config_file(path))
            _deep_merge(self._data, data)
            self._sources.append(str(path))
            loaded.append(str(path))
            logger.debug("config_file_loaded", extra={"path": str(path), "keys": len(data)})
        return loaded

    def load_data(self, data: Mapping[str, Any], source: str = "data") -> None:
        """Aplica um mapeamento como nova camada."""
        self._ensure_writable()
        _deep_merge(self._data, copy.deepcopy(dict(data)))
        self._sources.append(source)

    def load_flags(
        self,
        names: Iterable[str],
        argv: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Mescla as flags da allow-list presentes em ``argv``.

        Args:
            names: Specs ``chave[:tipo]`` aceitas.
            argv: Argumentos a analisar; ``None`` usa ``sys.argv[1:]``.

        Returns:
            Valores aplicados (somente flags presentes).

        Raises:
            ConfigError: Valor de flag inválido.
        """
        self._ensure_writable()
        args = sys.argv[1:] if argv is None else argv
        values = parse_flags(names, args)
        for key, value in values.items():
            self._set_path(key, value)
        if values:
            self._sources.append("flags")
            logger.debug("config_flags_merged", extra={"flags": sorted(values)})
        return values

    def set(self, key: str, value: Any) -> None:
        self._ensure_writable()
        self._set_path(key, value)

    def lock(self) -> None:
        """Trava o store; escritas posteriores levantam ConfigLockedError."""
        self._locked = True

    # ──────────────────────────────────────────────────────────────────────
    # Leitura
    # ──────────────────────────────────────────────────────────────────────

    def get(self, key: str, default: Any = None) -> Any:
        value = self._lookup(key)
        return default if value is _MISSING else value

    def exists(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def string(self, key: str, default: str = "") -> str:
        """Valor como string; ausente ou ``None`` devolve ``default``."""
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return default
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def def_string(self, key: str, default: str = "") -> str:
        """Como ``string``, mas valor vazio também devolve ``default``."""
        return self.string(key, default) or default

    def bool(self, key: str, default: bool = False) -> bool:
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, int | float):
            return value != 0
        try:
            return parse_bool(str(value))
        except ValueError as exc:
            raise ConfigError(f"Chave '{key}' não é booleana: {value!r}") from exc

    def int(self, key: str, default: int = 0) -> int:
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Chave '{key}' não é inteira: {value!r}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Cópia profunda dos dados (segura para mutação pelo chamador)."""
        return copy.deepcopy(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore(name={self._name!r}, sources={self._sources!r}, locked={self._locked})"

    # ──────────────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────────────

    def _ensure_writable(self) -> None:
        if self._locked:
            raise ConfigLockedError(f"Config '{self._name}' é somente leitura após o boot")

    def _lookup(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return _MISSING
        return node

    def _set_path(self, key: str, value: Any) -> None:
        parts = key.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    """Mescla ``override`` em ``base`` in place; dicts aninhados recursivamente."""
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _deep_merge(current, value)
        else:
            base[key] = value
