"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Conector Evolution
from config.settings.evolution import (
    SEND_LIST_PATH,
    EvolutionSettings,
    get_evolution_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "SEND_LIST_PATH",
    # Base
    "BaseSettings",
    "Environment",
    # Conectores
    "EvolutionSettings",
    "get_base_settings",
    "get_evolution_settings",
]
