"""Use case de envio de lista interativa via Evolution API."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.protocols.models import ExecutionItem
from app.use_cases.evolution.error_result import build_error_data
from utils.errors import NodeOperationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.execution_context import ExecutionContextProtocol
    from app.protocols.http_client import EvolutionHttpClientProtocol
    from app.protocols.payload_builder import ListPayloadBuilderProtocol

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SendListMessageUseCase:
    """Orquestra leitura de parâmetros, build do payload e envio."""

    def __init__(
        self,
        builder: ListPayloadBuilderProtocol,
        client: EvolutionHttpClientProtocol,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._builder = builder
        self._client = client
        self._clock = clock or _utc_now

    async def execute(self, context: ExecutionContextProtocol) -> list[ExecutionItem]:
        """Executa o envio e devolve um único item de resultado.

        Returns:
            `[{success: True, data}]` em sucesso, ou o item de erro quando
            o host permite continuar em caso de falha.

        Raises:
            NodeOperationError: Em falha, quando o host não permite continuar.
        """
        try:
            request = self._builder.build_request(context)
            payload = self._builder.build_full_payload(request)
            logger.info(
                "Enviando lista",
                extra={
                    "instance": request.instance_name,
                    "section_count": len(request.sections),
                    "row_count": request.row_count,
                },
            )
            response = await self._client.send_list(request.instance_name, payload)
        except Exception as exc:
            return self._handle_failure(context, exc)

        return [ExecutionItem(json={"success": True, "data": response})]

    def _handle_failure(
        self,
        context: ExecutionContextProtocol,
        exc: Exception,
    ) -> list[ExecutionItem]:
        error_data = build_error_data(exc, self._clock())
        error = error_data["error"]
        logger.warning(
            "Falha no envio de lista",
            extra={
                "node": context.node_name,
                "error_type": type(exc).__name__,
                "code": error["code"],
            },
        )

        if not context.continue_on_fail():
            raise NodeOperationError(
                context.node_name,
                str(exc),
                summary=error["message"],
                description=error["details"],
                code=error["code"],
            ) from exc

        return [ExecutionItem(json=error_data, error=error_data)]
