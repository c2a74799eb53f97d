"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class EvolutionHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP da Evolution API."""

    async def send_list(
        self,
        instance_name: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...
