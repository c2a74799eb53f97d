"""Use cases da Evolution API."""

from .error_result import build_error_data, format_timestamp
from .send_list_message import SendListMessageUseCase

__all__ = [
    "SendListMessageUseCase",
    "build_error_data",
    "format_timestamp",
]
