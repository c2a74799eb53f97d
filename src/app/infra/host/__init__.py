"""Hosts de execução concretos."""

from .static_context import DEFAULT_NODE_NAME, StaticExecutionContext

__all__ = [
    "DEFAULT_NODE_NAME",
    "StaticExecutionContext",
]
