"""Tradução de exceções para o resultado de erro uniforme do node."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from app.constants.evolution import (
    PARAMETER_ERROR_MARKER,
    UNKNOWN_ERROR_CODE,
    ListErrorMessage,
)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_error_data(error: BaseException, moment: datetime) -> dict[str, Any]:
    """Monta `{success: False, error: {message, details, code, timestamp}}`.

    Erros de parâmetro não resolvido pelo host recebem mensagem e
    detalhe fixos; os demais expõem o texto original em `details`.
    """
    error_text = str(error)
    is_parameter_error = PARAMETER_ERROR_MARKER in error_text

    if is_parameter_error:
        message = ListErrorMessage.INVALID_PARAMETERS.value
        details = ListErrorMessage.INVALID_PARAMETERS_DETAILS.value
    else:
        message = ListErrorMessage.SEND_FAILED.value
        details = error_text

    code = getattr(error, "code", None) or UNKNOWN_ERROR_CODE
    return {
        "success": False,
        "error": {
            "message": message,
            "details": details,
            "code": str(code),
            "timestamp": format_timestamp(moment),
        },
    }
