"""Modelos de domínio da mensagem de lista interativa.

Os nomes de campo seguem o snake_case do projeto; os aliases
correspondem às chaves esperadas pela Evolution API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ListRow(BaseModel):
    """Linha selecionável de uma seção."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(default="", description="Texto exibido na linha.")
    description: str = Field(default="", description="Texto secundário da linha.")
    row_id: str = Field(..., alias="rowId", description="ID devolvido na resposta.")


class ListSection(BaseModel):
    """Seção da lista com suas linhas."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Título da seção.")
    rows: list[ListRow] = Field(default_factory=list)


class ListMessageOptions(BaseModel):
    """Opções adicionais do envio (atraso, citação e menções)."""

    model_config = ConfigDict(extra="ignore")

    delay: int | float | None = Field(
        default=None,
        description="Atraso em milissegundos antes do envio.",
    )
    quoted_message_id: str | None = Field(
        default=None,
        description="ID da mensagem citada.",
    )
    mentions_everyone: bool = Field(default=False, description="Menciona todo o grupo.")
    mentioned: list[str] = Field(
        default_factory=list,
        description="JIDs mencionados (já normalizados).",
    )


class ListMessageRequest(BaseModel):
    """Requisição completa de envio de lista para uma instância."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    instance_name: str = Field(..., description="Instância Evolution que envia.")
    number: str = Field(..., description="Destino (número ou remoteJid).")
    title: str = Field(default="")
    description: str = Field(default="")
    button_text: str = Field(default="", alias="buttonText")
    footer_text: str = Field(default="", alias="footerText")
    sections: list[ListSection] = Field(default_factory=list)
    options: ListMessageOptions = Field(default_factory=ListMessageOptions)

    @property
    def row_count(self) -> int:
        """Total de linhas em todas as seções."""
        return sum(len(section.rows) for section in self.sections)
