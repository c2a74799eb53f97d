"""Protocolos e contratos do core da aplicação."""

from .execution_context import MISSING, ExecutionContextProtocol
from .http_client import EvolutionHttpClientProtocol
from .models import ExecutionItem
from .payload_builder import ListPayloadBuilderProtocol

__all__ = [
    "MISSING",
    "EvolutionHttpClientProtocol",
    "ExecutionContextProtocol",
    "ExecutionItem",
    "ListPayloadBuilderProtocol",
]
