"""Parse da allow-list de flags de linha de comando.

Cada nome segue ``chave[:tipo]`` com tipo em str, bool, int ou float.
Somente flags efetivamente passadas entram no resultado, assim valores
vindos de arquivos só são sobrescritos quando a flag aparece.

    --debug            -> {"debug": True}
    --debug=false      -> {"debug": False}
    --debug serve      -> {"debug": True}   ("serve" não é consumido)
    --port 9000        -> {"port": 9000}   (com "port:int")
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from utils.errors import ConfigError

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"valor booleano inválido: {raw!r}")


_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "str": str,
    "bool": parse_bool,
    "int": int,
    "float": float,
}


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser que levanta ConfigError em vez de chamar sys.exit."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigError(f"Flag de linha de comando inválida: {message}")


def parse_flag_spec(spec: str) -> tuple[str, str]:
    """Separa ``chave:tipo``; tipo ausente vale ``str``."""
    key, _, kind = spec.partition(":")
    key = key.strip().lstrip("-")
    kind = kind.strip() or "str"
    if not key:
        raise ConfigError(f"Nome de flag vazio em '{spec}'")
    if kind not in _CONVERTERS:
        raise ConfigError(f"Tipo de flag desconhecido '{kind}' em '{spec}'")
    return key, kind


def _split_bool_flags(argv: Sequence[str], bool_keys: set[str]) -> tuple[dict[str, str], list[str]]:
    """Separa as flags bool de ``argv``.

    Flag bool nunca consome o argumento seguinte: ``--debug`` vale
    ``true`` e o valor explícito só é aceito como ``--debug=<valor>``.
    A última ocorrência vence; nada depois de ``--`` é examinado.
    """
    raw_values: dict[str, str] = {}
    remaining: list[str] = []
    tokens = list(argv)
    for position, token in enumerate(tokens):
        if token == "--":
            remaining.extend(tokens[position:])
            break
        name, sep, raw = token.partition("=")
        key = name[2:] if name.startswith("--") else ""
        if key in bool_keys:
            raw_values[key] = raw if sep else "true"
        else:
            remaining.append(token)
    return raw_values, remaining


def parse_flags(names: Iterable[str], argv: Sequence[str]) -> dict[str, Any]:
    """Extrai de ``argv`` os valores das flags da allow-list.

    Argumentos fora da allow-list são ignorados.

    Raises:
        ConfigError: Spec inválida ou valor que não converte para o tipo.
    """
    parser = _FlagParser(add_help=False, allow_abbrev=False)
    kinds: dict[str, str] = {}
    for spec in names:
        key, kind = parse_flag_spec(spec)
        kinds[key] = kind
        if kind != "bool":
            parser.add_argument(f"--{key}", dest=key, default=argparse.SUPPRESS)

    bool_keys = {key for key, kind in kinds.items() if kind == "bool"}
    raw_values, remaining = _split_bool_flags(argv, bool_keys)
    namespace, _unknown = parser.parse_known_args(remaining)
    raw_values.update(vars(namespace))

    values: dict[str, Any] = {}
    for key, raw in raw_values.items():
        try:
            values[key] = _CONVERTERS[kinds[key]](raw)
        except ValueError as exc:
            raise ConfigError(f"Flag --{key}: {exc}") from exc
    return values
