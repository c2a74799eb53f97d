"""Contratos de dados trocados com o host de workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ExecutionItem:
    """Item que entra ou sai de um node.

    Attributes:
        json: Dados do item
        error: Dados de erro quando o item representa uma falha
    """

    json: dict[str, Any] = field(default_factory=dict)
    error: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato do host (`error` só quando presente)."""
        data: dict[str, Any] = {"json": self.json}
        if self.error is not None:
            data["error"] = self.error
        return data
