"""Agregador de settings do appboot.

Re-exporta as settings de runtime e o getter cacheado.
"""

from __future__ import annotations

from config.settings.app import (
    DEFAULT_CONFIG_FILES,
    DEFAULT_ENV_FILES,
    DEFAULT_FLAGS,
    AppSettings,
    Environment,
    get_app_settings,
)

__all__ = [
    "DEFAULT_CONFIG_FILES",
    "DEFAULT_ENV_FILES",
    "DEFAULT_FLAGS",
    "AppSettings",
    "Environment",
    "get_app_settings",
]
