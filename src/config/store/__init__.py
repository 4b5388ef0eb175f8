"""Config store em camadas (arquivos YAML/JSON + flags de CLI)."""

from config.store.flags import parse_bool, parse_flags
from config.store.sources import expand_env, read_config_file
from config.store.store import ConfigStore

__all__ = [
    "ConfigStore",
    "expand_env",
    "parse_bool",
    "parse_flags",
    "read_config_file",
]
