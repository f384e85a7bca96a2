"""Agregador de settings do serviço.

Re-exporta as settings de cada domínio e seus getters cacheados.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.steadfast import (
    SteadfastSettings,
    get_steadfast_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "SteadfastSettings",
    "get_base_settings",
    "get_steadfast_settings",
]
