"""Constantes do node de envio de lista (Evolution API)."""

from __future__ import annotations

from enum import StrEnum

# Sufixo de JID individual do WhatsApp
WHATSAPP_JID_SUFFIX = "@s.whatsapp.net"

# Títulos padrão de seção
DEFAULT_AUTO_SECTION_TITLE = "Seção Automática"
DEFAULT_MANUAL_SECTION_TITLE = "Seção Manual"

# Trecho presente em erros do host quando um parâmetro não é resolvido
PARAMETER_ERROR_MARKER = "Could not get parameter"


class NodeParameter(StrEnum):
    """Nomes dos parâmetros lidos do host (caminhos pontuados)."""

    INSTANCE_NAME = "instanceName"
    REMOTE_JID = "remoteJid"
    TITLE = "title"
    DESCRIPTION = "description"
    BUTTON_TEXT = "buttonText"
    FOOTER_TEXT = "footerText"
    ENABLE_AUTO_ROWS = "enableAutoRows"
    OPTIONS = "options_message"
    SECTIONS_AUTO = "sectionsAuto.sectionValuesAuto"
    SECTIONS_MANUAL = "sectionsManual.sectionValuesManual"


class ListErrorMessage(StrEnum):
    """Mensagens de erro exibidas ao usuário do node."""

    MISSING_AUTO_SECTION = (
        "Parâmetros inválidos ou ausentes: Nenhuma seção automática preenchida."
    )
    MISSING_AUTO_ROWS = (
        "Parâmetros inválidos ou ausentes: Você deve adicionar ao menos uma "
        "configuração de linhas automáticas."
    )
    MISSING_MANUAL_SECTION = (
        "Parâmetros inválidos ou ausentes: Nenhuma seção manual preenchida."
    )
    INVALID_PARAMETERS = "Parâmetros inválidos ou ausentes"
    INVALID_PARAMETERS_DETAILS = (
        "Verifique se todos os campos obrigatórios foram preenchidos corretamente"
    )
    SEND_FAILED = "Erro ao enviar lista"


UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"
