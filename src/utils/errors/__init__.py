"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    NodeOperationError,
    ParameterNotFoundError,
)

__all__ = [
    "InfrastructureError",
    "NodeOperationError",
    "ParameterNotFoundError",
]
