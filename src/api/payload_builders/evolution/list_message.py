"""Builder do payload de `POST /message/sendList/{instance}`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.evolution.options import apply_options, parse_options
from api.payload_builders.evolution.sections import (
    as_text,
    build_auto_sections,
    build_manual_sections,
)
from app.constants.evolution import NodeParameter
from app.domain.list_message import ListMessageRequest

if TYPE_CHECKING:
    from app.protocols.execution_context import ExecutionContextProtocol

logger = logging.getLogger(__name__)


class ListPayloadBuilder:
    """Lê os parâmetros do host e monta o payload da lista."""

    def build_request(self, context: ExecutionContextProtocol) -> ListMessageRequest:
        """Lê parâmetros e seções do host.

        Args:
            context: Host de execução

        Returns:
            Requisição de lista pronta para serialização

        Raises:
            NodeOperationError: Seções ausentes no modo escolhido
        """
        items = context.get_input_data()

        def param(name: NodeParameter) -> Any:
            return context.get_node_parameter(name, 0)

        instance_name = param(NodeParameter.INSTANCE_NAME)
        remote_jid = param(NodeParameter.REMOTE_JID)
        title = param(NodeParameter.TITLE)
        description = param(NodeParameter.DESCRIPTION)
        button_text = param(NodeParameter.BUTTON_TEXT)
        footer_text = param(NodeParameter.FOOTER_TEXT)

        enable_auto_rows = bool(
            context.get_node_parameter(NodeParameter.ENABLE_AUTO_ROWS, 0, False)
        )
        raw_options = context.get_node_parameter(NodeParameter.OPTIONS, 0, {})

        if enable_auto_rows:
            sections = build_auto_sections(context, len(items))
        else:
            sections = build_manual_sections(context)

        logger.debug(
            "Seções da lista montadas",
            extra={
                "auto_rows": enable_auto_rows,
                "section_count": len(sections),
                "input_items": len(items),
            },
        )

        return ListMessageRequest(
            instance_name=str(instance_name),
            number=str(remote_jid),
            title=as_text(title),
            description=as_text(description),
            button_text=as_text(button_text),
            footer_text=as_text(footer_text),
            sections=sections,
            options=parse_options(raw_options),
        )

    def build_full_payload(self, request: ListMessageRequest) -> dict[str, Any]:
        """Serializa a requisição no body esperado pela Evolution API."""
        body: dict[str, Any] = {
            "number": request.number,
            "title": request.title,
            "description": request.description,
            "buttonText": request.button_text,
            "footerText": request.footer_text,
            "sections": [
                section.model_dump(by_alias=True) for section in request.sections
            ],
        }
        return apply_options(body, request.options)
