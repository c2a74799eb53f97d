"""Host de execução em memória.

Implementa ExecutionContextProtocol a partir de dicts, para execução
local (scripts/send_list.py) e testes. Não é um motor de expressões:
resolve apenas placeholders `{{ $json.campo }}` contra o item corrente.
"""

from __future__ import annotations

import copy
import re
from typing import Any

from app.protocols.execution_context import MISSING
from app.protocols.models import ExecutionItem
from utils.errors import ParameterNotFoundError

_PLACEHOLDER_RE = re.compile(r"\{\{\s*\$json((?:\.[A-Za-z0-9_]+)*)\s*\}\}")

DEFAULT_NODE_NAME = "Evolution API"


def _lookup_path(data: Any, path: str) -> Any:
    """Percorre `a.b.c` em dicts aninhados; MISSING se algum trecho falta."""
    current = data
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return MISSING
        current = current[part]
    return current


def _resolve_placeholders(value: Any, item_json: dict[str, Any]) -> Any:
    if isinstance(value, dict):
        return {key: _resolve_placeholders(inner, item_json) for key, inner in value.items()}
    if isinstance(value, list):
        return [_resolve_placeholders(inner, item_json) for inner in value]
    if not isinstance(value, str) or "{{" not in value:
        return value

    def _field(match: re.Match[str]) -> Any:
        path = match.group(1).lstrip(".")
        found = _lookup_path(item_json, path) if path else item_json
        return None if found is MISSING else found

    # Placeholder único preserva o tipo do valor do item
    whole = _PLACEHOLDER_RE.fullmatch(value.strip())
    if whole:
        return _field(whole)

    def _as_str(match: re.Match[str]) -> str:
        found = _field(match)
        return "" if found is None else str(found)

    return _PLACEHOLDER_RE.sub(_as_str, value)


class StaticExecutionContext:
    """Host com parâmetros fixos e items fornecidos na criação.

    Args:
        parameters: Parâmetros do node (chaves aninhadas para caminhos pontuados)
        items: Items de entrada (dicts `json`); padrão: um item vazio
        continue_on_fail: Se o host continua o workflow após falha
        node_name: Nome exibido em erros
    """

    def __init__(
        self,
        parameters: dict[str, Any],
        items: list[dict[str, Any]] | None = None,
        continue_on_fail: bool = False,
        node_name: str = DEFAULT_NODE_NAME,
    ) -> None:
        self.node_name = node_name
        self._parameters = parameters
        if items is None:
            items = [{}]
        self._items = [ExecutionItem(json=dict(item)) for item in items]
        self._continue_on_fail = continue_on_fail

    def get_input_data(self) -> list[ExecutionItem]:
        return list(self._items)

    def get_node_parameter(
        self,
        name: str,
        item_index: int,
        default: Any = MISSING,
    ) -> Any:
        """Resolve parâmetro e placeholders para o item informado.

        Raises:
            ParameterNotFoundError: Parâmetro ausente e sem default
        """
        value = _lookup_path(self._parameters, name)
        if value is MISSING:
            if default is MISSING:
                raise ParameterNotFoundError(name, item_index)
            return copy.deepcopy(default)

        item_json = self._items[item_index].json if 0 <= item_index < len(self._items) else {}
        return _resolve_placeholders(copy.deepcopy(value), item_json)

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail
