"""Helpers de logging para a Evolution API (sem número nem apikey)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import EvolutionApiError

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: EvolutionApiError,
    method: str,
    instance_name: str,
) -> None:
    """Loga erro da Evolution sem expor dados sensíveis."""
    logger.warning(
        "Erro da Evolution API",
        extra={
            "method": method,
            "instance": instance_name,
            "status": api_error.status,
            "error": api_error.error,
            "is_permanent": api_error.is_permanent,
        },
    )


def log_success(
    method: str,
    instance_name: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Envio Evolution bem-sucedido",
        extra={
            "method": method,
            "instance": instance_name,
            "status_code": status_code,
        },
    )
