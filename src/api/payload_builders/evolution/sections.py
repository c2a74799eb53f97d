"""Montagem das seções da lista (modo manual e automático)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.evolution import (
    DEFAULT_AUTO_SECTION_TITLE,
    DEFAULT_MANUAL_SECTION_TITLE,
    ListErrorMessage,
    NodeParameter,
)
from app.domain.list_message import ListRow, ListSection
from utils.errors import NodeOperationError

if TYPE_CHECKING:
    from app.protocols.execution_context import ExecutionContextProtocol


def as_text(value: Any) -> str:
    """Converte valor do host em texto (None vira string vazia)."""
    if value is None:
        return ""
    return str(value)


def _row_templates(section: dict[str, Any]) -> list[dict[str, Any]]:
    rows = section.get("rows") or {}
    return list(rows.get("rowValuesAuto") or [])


def _auto_row(template: dict[str, Any], index: int) -> ListRow:
    position = index + 1
    return ListRow(
        title=as_text(template.get("rowTitleExp")) or f"Item {position}",
        description=as_text(template.get("rowDescriptionExp")),
        row_id=as_text(template.get("rowIdExp")) or f"autoRow_{position}",
    )


def _row_template_for_item(
    context: ExecutionContextProtocol,
    index: int,
    fallback: dict[str, Any],
) -> dict[str, Any]:
    """Resolve o template de linha no índice do item.

    O host avalia expressões por item; sem seção resolvida no índice,
    usa o template do item 0.
    """
    sections = context.get_node_parameter(NodeParameter.SECTIONS_AUTO, index, [])
    templates = _row_templates(sections[0]) if sections else []
    return templates[0] if templates else fallback


def build_auto_sections(
    context: ExecutionContextProtocol,
    item_count: int,
) -> list[ListSection]:
    """Constrói uma seção com uma linha por item de entrada.

    Args:
        context: Host de execução
        item_count: Quantidade de items de entrada

    Returns:
        Lista com exatamente uma seção

    Raises:
        NodeOperationError: Sem seção automática ou sem template de linha
    """
    sections_auto = context.get_node_parameter(NodeParameter.SECTIONS_AUTO, 0, [])
    if not sections_auto:
        raise NodeOperationError(context.node_name, ListErrorMessage.MISSING_AUTO_SECTION)

    # Apenas a primeira seção automática é considerada
    first_section = sections_auto[0]
    templates = _row_templates(first_section)
    if not templates:
        raise NodeOperationError(context.node_name, ListErrorMessage.MISSING_AUTO_ROWS)

    rows = [
        _auto_row(_row_template_for_item(context, index, templates[0]), index)
        for index in range(item_count)
    ]
    title = as_text(first_section.get("titleAuto")) or DEFAULT_AUTO_SECTION_TITLE
    return [ListSection(title=title, rows=rows)]


def _manual_section(section: dict[str, Any]) -> ListSection:
    raw_title = as_text(section.get("title"))
    raw_rows = (section.get("rows") or {}).get("rowValuesManual") or []
    rows = [
        ListRow(
            title=as_text(row.get("title")),
            description=as_text(row.get("description")),
            # ID padrão usa o título bruto da seção, não o título padrão
            row_id=as_text(row.get("rowId")) or f"{raw_title}_{as_text(row.get('title'))}",
        )
        for row in raw_rows
    ]
    return ListSection(title=raw_title or DEFAULT_MANUAL_SECTION_TITLE, rows=rows)


def build_manual_sections(context: ExecutionContextProtocol) -> list[ListSection]:
    """Constrói as seções informadas manualmente no node.

    Raises:
        NodeOperationError: Se nenhuma seção manual foi preenchida
    """
    sections_manual = context.get_node_parameter(NodeParameter.SECTIONS_MANUAL, 0, [])
    if not sections_manual:
        raise NodeOperationError(
            context.node_name, ListErrorMessage.MISSING_MANUAL_SECTION
        )
    return [_manual_section(section) for section in sections_manual]
