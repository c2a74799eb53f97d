"""Opções adicionais do envio: delay, mensagem citada e menções."""

from __future__ import annotations

from typing import Any

from app.constants.evolution import WHATSAPP_JID_SUFFIX
from app.domain.list_message import ListMessageOptions


def normalize_mention(number: str) -> str:
    """Garante o sufixo de JID individual no número mencionado."""
    number = number.strip()
    if WHATSAPP_JID_SUFFIX in number:
        return number
    return f"{number}{WHATSAPP_JID_SUFFIX}"


def parse_mentioned(raw: str) -> list[str]:
    """Converte lista separada por vírgula em JIDs normalizados.

    Entradas vazias (ex: "a,,b") são descartadas.
    """
    return [normalize_mention(part) for part in raw.split(",") if part.strip()]


def _quoted_message_id(raw_options: dict[str, Any]) -> str | None:
    quoted = raw_options.get("quoted") or {}
    message_quoted = quoted.get("messageQuoted") or {}
    message_id = message_quoted.get("messageId")
    return str(message_id) if message_id else None


def parse_options(raw_options: dict[str, Any] | None) -> ListMessageOptions:
    """Converte a coleção `options_message` do host em ListMessageOptions.

    Args:
        raw_options: Coleção de opções como entregue pelo host

    Returns:
        Opções normalizadas
    """
    raw_options = raw_options or {}

    mentions_everyone = False
    mentioned: list[str] = []
    settings = (raw_options.get("mentions") or {}).get("mentionsSettings")
    if settings:
        if settings.get("mentionsEveryOne"):
            mentions_everyone = True
        elif settings.get("mentioned"):
            mentioned = parse_mentioned(str(settings["mentioned"]))

    return ListMessageOptions(
        delay=raw_options.get("delay") or None,
        quoted_message_id=_quoted_message_id(raw_options),
        mentions_everyone=mentions_everyone,
        mentioned=mentioned,
    )


def apply_options(body: dict[str, Any], options: ListMessageOptions) -> dict[str, Any]:
    """Adiciona ao body apenas as opções efetivamente informadas."""
    if options.delay:
        body["delay"] = options.delay

    if options.quoted_message_id:
        body["quoted"] = {"key": {"id": options.quoted_message_id}}

    if options.mentions_everyone:
        body["mentionsEveryOne"] = True
    elif options.mentioned:
        body["mentioned"] = list(options.mentioned)

    return body
