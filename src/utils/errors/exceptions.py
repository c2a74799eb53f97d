"""Exceções compartilhadas entre host, builders e conectores."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ParameterNotFoundError(LookupError):
    """Host não conseguiu resolver um parâmetro obrigatório do node."""

    def __init__(self, name: str, item_index: int = 0) -> None:
        super().__init__(f"Could not get parameter '{name}' (item {item_index})")
        self.name = name
        self.item_index = item_index


class NodeOperationError(Exception):
    """Falha de execução do node, exibida ao usuário do host.

    Attributes:
        node_name: Nome do node que falhou
        summary: Mensagem curta (ex: "Erro ao enviar lista")
        description: Detalhe legível para o usuário
        code: Código opcional propagado para o resultado de erro
    """

    def __init__(
        self,
        node_name: str,
        message: str,
        summary: str | None = None,
        description: str | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.node_name = node_name
        self.summary = summary
        self.description = description
        self.code = code
