"""Protocolo do host de workflow que executa o node.

O host fornece leitura de parâmetros, os items de entrada e a
semântica de "continuar em caso de falha".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Protocol

if TYPE_CHECKING:
    from .models import ExecutionItem


class _Missing:
    """Sentinela para parâmetro sem valor padrão."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


class ExecutionContextProtocol(Protocol):
    """Contrato mínimo do host de execução."""

    node_name: str

    def get_input_data(self) -> list[ExecutionItem]: ...

    def get_node_parameter(
        self,
        name: str,
        item_index: int,
        default: Any = MISSING,
    ) -> Any:
        """Resolve parâmetro (caminho pontuado) para o item informado.

        Sem default e sem valor, o host levanta erro contendo
        "Could not get parameter".
        """
        ...

    def continue_on_fail(self) -> bool: ...
