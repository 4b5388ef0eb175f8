"""Leitura de arquivos de configuração (YAML/JSON) e expansão de ${VAR}."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any

import yaml

from utils.errors import ConfigLoadError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})

# ${NAME} ou ${NAME|default}
_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?:\|([^}]*))?\}")


def read_config_file(path: Path) -> dict[str, Any]:
    """Lê um arquivo de config existente e devolve o mapeamento.

    Arquivo vazio vale como mapeamento vazio.

    Raises:
        ConfigLoadError: Extensão não suportada, sintaxe inválida ou raiz
            que não é um mapeamento.
    """
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(str(path), str(exc)) from exc

    if suffix in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(str(path), f"YAML inválido: {exc}") from exc
    elif suffix in JSON_SUFFIXES:
        try:
            data = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(str(path), f"JSON inválido: {exc}") from exc
    else:
        raise ConfigLoadError(str(path), f"formato não suportado: '{suffix or path.name}'")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(str(path), "raiz do arquivo deve ser um mapeamento")
    return data


def expand_env(value: Any) -> Any:
    """Expande referências ${VAR} / ${VAR|default} a partir de os.environ.

    Percorre dicts e listas. Referência sem valor e sem default fica literal.
    """
    if isinstance(value, str):
        return _ENV_REF.sub(_replace_ref, value)
    if isinstance(value, dict):
        return {key: expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env(item) for item in value]
    return value


def _replace_ref(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    resolved = os.environ.get(name)
    if resolved is not None:
        return resolved
    if default is not None:
        return default
    return match.group(0)
