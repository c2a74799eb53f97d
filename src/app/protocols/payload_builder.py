"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.list_message import ListMessageRequest

    from .execution_context import ExecutionContextProtocol


class ListPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para montar a requisição de lista a partir do host."""

    def build_request(self, context: ExecutionContextProtocol) -> ListMessageRequest: ...

    def build_full_payload(self, request: ListMessageRequest) -> dict[str, Any]: ...
