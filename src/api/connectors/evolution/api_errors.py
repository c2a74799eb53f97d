"""Erros e helpers de parsing para respostas de erro da Evolution API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EvolutionApiError:
    """Erro retornado pela Evolution API."""

    status: int
    error: str
    messages: tuple[str, ...]
    is_permanent: bool  # True se erro não é retentável

    @property
    def detail(self) -> str:
        """Mensagem legível (mensagens da API ou o texto do status)."""
        if self.messages:
            return "; ".join(self.messages)
        return self.error


def is_permanent_error(status: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    return status != 429 and 400 <= status < 500


def _flatten_messages(raw: Any) -> list[str]:
    # A API devolve `message` como string, lista ou lista de listas
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        flat: list[str] = []
        for item in raw:
            flat.extend(_flatten_messages(item))
        return flat
    if isinstance(raw, dict):
        return _flatten_messages(raw.get("message"))
    text = str(raw).strip()
    return [text] if text else []


def parse_evolution_error(
    response_data: Any,
    status_code: int,
) -> EvolutionApiError | None:
    """Extrai informações de erro do response da Evolution.

    Formato típico:
        {"status": 400, "error": "Bad Request",
         "response": {"message": [["instance not found"]]}}

    Args:
        response_data: JSON do response (ou None se corpo não-JSON)
        status_code: Status HTTP recebido

    Returns:
        EvolutionApiError se status >= 400, None se sucesso
    """
    if status_code < 400:
        return None

    data = response_data if isinstance(response_data, dict) else {}
    status = data.get("status") if isinstance(data.get("status"), int) else status_code
    error = str(data.get("error") or "Erro desconhecido")
    messages = _flatten_messages(data.get("response"))
    if not messages and data.get("message"):
        messages = _flatten_messages(data.get("message"))

    return EvolutionApiError(
        status=status,
        error=error,
        messages=tuple(messages),
        is_permanent=is_permanent_error(status),
    )
