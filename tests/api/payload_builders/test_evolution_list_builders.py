"""Testes para api.payload_builders.evolution.

Cobre: modo manual, modo automático, opções (delay, quoted, menções)
e serialização do body final.
"""

from __future__ import annotations

from typing import Any

import pytest

from api.payload_builders.evolution import (
    ListPayloadBuilder,
    apply_options,
    build_auto_sections,
    build_manual_sections,
    normalize_mention,
    parse_mentioned,
    parse_options,
)
from app.constants.evolution import ListErrorMessage
from app.infra.host import StaticExecutionContext
from utils.errors import NodeOperationError, ParameterNotFoundError


def _params(**overrides: Any) -> dict[str, Any]:
    """Parâmetros mínimos válidos em modo manual."""
    params: dict[str, Any] = {
        "instanceName": "vendas",
        "remoteJid": "5511999999999",
        "title": "Cardápio",
        "description": "Escolha uma opção",
        "buttonText": "Ver opções",
        "footerText": "Loja Centro",
        "sectionsManual": {
            "sectionValuesManual": [
                {
                    "title": "Bebidas",
                    "rows": {
                        "rowValuesManual": [
                            {"title": "Café", "description": "Expresso", "rowId": "cafe"},
                            {"title": "Chá"},
                        ]
                    },
                }
            ]
        },
    }
    params.update(overrides)
    return params


def _auto_params(section: dict[str, Any] | None = None, **overrides: Any) -> dict[str, Any]:
    params = _params(enableAutoRows=True, **overrides)
    params.pop("sectionsManual")
    if section is not None:
        params["sectionsAuto"] = {"sectionValuesAuto": [section]}
    return params


class TestManualSections:
    """Testes para build_manual_sections."""

    def test_rows_mapped_with_defaults(self) -> None:
        """Descrição vazia e rowId derivado de seção + linha quando ausentes."""
        context = StaticExecutionContext(_params())
        sections = build_manual_sections(context)

        assert len(sections) == 1
        rows = sections[0].rows
        assert rows[0].model_dump(by_alias=True) == {
            "title": "Café",
            "description": "Expresso",
            "rowId": "cafe",
        }
        assert rows[1].description == ""
        assert rows[1].row_id == "Bebidas_Chá"

    def test_section_without_title_uses_default_but_row_id_uses_raw_title(self) -> None:
        """Título padrão na seção; rowId usa o título bruto (vazio)."""
        params = _params(
            sectionsManual={
                "sectionValuesManual": [
                    {"rows": {"rowValuesManual": [{"title": "Pix"}]}},
                ]
            }
        )
        sections = build_manual_sections(StaticExecutionContext(params))
        assert sections[0].title == "Seção Manual"
        assert sections[0].rows[0].row_id == "_Pix"

    def test_section_without_rows_has_empty_rows(self) -> None:
        """Seção sem linhas gera rows vazio."""
        params = _params(sectionsManual={"sectionValuesManual": [{"title": "Vazia"}]})
        sections = build_manual_sections(StaticExecutionContext(params))
        assert sections[0].rows == []

    def test_multiple_sections_preserve_order(self) -> None:
        """Todas as seções manuais são mantidas na ordem."""
        params = _params(
            sectionsManual={
                "sectionValuesManual": [{"title": "A"}, {"title": "B"}, {"title": "C"}]
            }
        )
        sections = build_manual_sections(StaticExecutionContext(params))
        assert [s.title for s in sections] == ["A", "B", "C"]

    def test_missing_sections_raises(self) -> None:
        """Sem seção manual levanta NodeOperationError."""
        params = _params()
        params.pop("sectionsManual")
        with pytest.raises(NodeOperationError) as exc_info:
            build_manual_sections(StaticExecutionContext(params))
        assert str(exc_info.value) == ListErrorMessage.MISSING_MANUAL_SECTION


class TestAutoSections:
    """Testes para build_auto_sections."""

    def test_one_row_per_item_with_defaults(self) -> None:
        """Sem expressões, usa Item N / autoRow_N."""
        section = {"rows": {"rowValuesAuto": [{}]}}
        context = StaticExecutionContext(_auto_params(section), items=[{}, {}, {}])
        sections = build_auto_sections(context, item_count=3)

        assert len(sections) == 1
        assert sections[0].title == "Seção Automática"
        assert [r.title for r in sections[0].rows] == ["Item 1", "Item 2", "Item 3"]
        assert [r.row_id for r in sections[0].rows] == ["autoRow_1", "autoRow_2", "autoRow_3"]
        assert all(r.description == "" for r in sections[0].rows)

    def test_rows_resolved_per_item(self) -> None:
        """Template é resolvido no índice de cada item."""
        section = {
            "titleAuto": "Produtos",
            "rows": {
                "rowValuesAuto": [
                    {
                        "rowTitleExp": "Produto: {{ $json.nome }}",
                        "rowDescriptionExp": "{{ $json.preco }}",
                        "rowIdExp": "{{ $json.sku }}",
                    }
                ]
            },
        }
        items = [
            {"nome": "Caneca", "preco": "R$ 30", "sku": "cn-1"},
            {"nome": "Camiseta", "preco": "R$ 80", "sku": "cm-2"},
        ]
        context = StaticExecutionContext(_auto_params(section), items=items)
        rows = build_auto_sections(context, item_count=2)[0].rows

        assert [r.title for r in rows] == ["Produto: Caneca", "Produto: Camiseta"]
        assert [r.description for r in rows] == ["R$ 30", "R$ 80"]
        assert [r.row_id for r in rows] == ["cn-1", "cm-2"]

    def test_only_first_auto_section_is_used(self) -> None:
        """Seções automáticas extras são ignoradas."""
        params = _auto_params()
        params["sectionsAuto"] = {
            "sectionValuesAuto": [
                {"titleAuto": "Primeira", "rows": {"rowValuesAuto": [{}]}},
                {"titleAuto": "Segunda", "rows": {"rowValuesAuto": [{}]}},
            ]
        }
        sections = build_auto_sections(StaticExecutionContext(params), item_count=1)
        assert [s.title for s in sections] == ["Primeira"]

    def test_missing_auto_section_raises(self) -> None:
        """Sem seção automática levanta NodeOperationError."""
        with pytest.raises(NodeOperationError) as exc_info:
            build_auto_sections(StaticExecutionContext(_auto_params()), item_count=1)
        assert str(exc_info.value) == ListErrorMessage.MISSING_AUTO_SECTION

    def test_missing_row_template_raises(self) -> None:
        """Seção sem linhas automáticas levanta NodeOperationError."""
        context = StaticExecutionContext(_auto_params({"titleAuto": "X"}))
        with pytest.raises(NodeOperationError) as exc_info:
            build_auto_sections(context, item_count=1)
        assert str(exc_info.value) == ListErrorMessage.MISSING_AUTO_ROWS

    def test_zero_items_yields_empty_rows(self) -> None:
        """Lista de items vazia gera seção sem linhas."""
        section = {"rows": {"rowValuesAuto": [{}]}}
        context = StaticExecutionContext(_auto_params(section), items=[])

        assert context.get_input_data() == []
        request = ListPayloadBuilder().build_request(context)
        assert len(request.sections) == 1
        assert request.sections[0].rows == []

    def test_default_items_yield_single_row(self) -> None:
        """Sem items informados o host fornece um item vazio."""
        section = {"rows": {"rowValuesAuto": [{}]}}
        request = ListPayloadBuilder().build_request(
            StaticExecutionContext(_auto_params(section))
        )
        assert [r.title for r in request.sections[0].rows] == ["Item 1"]


class TestMentions:
    """Testes para normalização de menções."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("5511999999999", "5511999999999@s.whatsapp.net"),
            (" 5511888888888 ", "5511888888888@s.whatsapp.net"),
            ("5511777777777@s.whatsapp.net", "5511777777777@s.whatsapp.net"),
        ],
    )
    def test_normalize_mention(self, raw: str, expected: str) -> None:
        """Sufixo adicionado apenas quando ausente."""
        assert normalize_mention(raw) == expected

    def test_parse_mentioned_drops_empty_entries(self) -> None:
        """Entradas vazias são descartadas."""
        assert parse_mentioned("111, ,222,") == [
            "111@s.whatsapp.net",
            "222@s.whatsapp.net",
        ]


class TestOptions:
    """Testes para parse_options e apply_options."""

    def test_empty_options_add_nothing(self) -> None:
        """Sem opções o body não muda."""
        body = apply_options({"number": "1"}, parse_options({}))
        assert body == {"number": "1"}

    def test_none_options(self) -> None:
        """None é tratado como coleção vazia."""
        options = parse_options(None)
        assert options.delay is None
        assert options.mentioned == []

    def test_delay_and_quoted(self) -> None:
        """Delay e mensagem citada entram no body."""
        options = parse_options(
            {"delay": 1200, "quoted": {"messageQuoted": {"messageId": "BAE5F"}}}
        )
        body = apply_options({}, options)
        assert body == {"delay": 1200, "quoted": {"key": {"id": "BAE5F"}}}

    def test_zero_delay_is_omitted(self) -> None:
        """Delay 0 não é enviado."""
        assert "delay" not in apply_options({}, parse_options({"delay": 0}))

    def test_quoted_without_message_id_is_omitted(self) -> None:
        """Citação sem messageId não é enviada."""
        body = apply_options({}, parse_options({"quoted": {"messageQuoted": {}}}))
        assert "quoted" not in body

    def test_mentions_everyone_wins_over_list(self) -> None:
        """mentionsEveryOne ignora a lista de números."""
        options = parse_options(
            {
                "mentions": {
                    "mentionsSettings": {"mentionsEveryOne": True, "mentioned": "111"}
                }
            }
        )
        body = apply_options({}, options)
        assert body == {"mentionsEveryOne": True}

    def test_mentioned_numbers(self) -> None:
        """Números mencionados são normalizados."""
        options = parse_options(
            {
                "mentions": {
                    "mentionsSettings": {
                        "mentionsEveryOne": False,
                        "mentioned": "111, 222@s.whatsapp.net",
                    }
                }
            }
        )
        body = apply_options({}, options)
        assert body == {"mentioned": ["111@s.whatsapp.net", "222@s.whatsapp.net"]}


class TestListPayloadBuilder:
    """Testes para ListPayloadBuilder (request + body completo)."""

    def test_full_manual_payload(self) -> None:
        """Body completo no modo manual."""
        builder = ListPayloadBuilder()
        request = builder.build_request(StaticExecutionContext(_params()))
        payload = builder.build_full_payload(request)

        assert request.instance_name == "vendas"
        assert request.row_count == 2
        assert payload == {
            "number": "5511999999999",
            "title": "Cardápio",
            "description": "Escolha uma opção",
            "buttonText": "Ver opções",
            "footerText": "Loja Centro",
            "sections": [
                {
                    "title": "Bebidas",
                    "rows": [
                        {"title": "Café", "description": "Expresso", "rowId": "cafe"},
                        {"title": "Chá", "description": "", "rowId": "Bebidas_Chá"},
                    ],
                }
            ],
        }

    def test_auto_mode_uses_input_items(self) -> None:
        """Modo automático gera uma linha por item de entrada."""
        section = {"titleAuto": "Pedidos", "rows": {"rowValuesAuto": [{"rowTitleExp": "{{ $json.id }}"}]}}
        context = StaticExecutionContext(
            _auto_params(section),
            items=[{"id": "A1"}, {"id": "B2"}],
        )
        builder = ListPayloadBuilder()
        payload = builder.build_full_payload(builder.build_request(context))

        assert payload["sections"] == [
            {
                "title": "Pedidos",
                "rows": [
                    {"title": "A1", "description": "", "rowId": "autoRow_1"},
                    {"title": "B2", "description": "", "rowId": "autoRow_2"},
                ],
            }
        ]

    def test_options_are_applied(self) -> None:
        """options_message é aplicado ao body."""
        params = _params(options_message={"delay": 500})
        builder = ListPayloadBuilder()
        payload = builder.build_full_payload(
            builder.build_request(StaticExecutionContext(params))
        )
        assert payload["delay"] == 500

    def test_missing_required_parameter_raises(self) -> None:
        """Parâmetro obrigatório ausente propaga erro do host."""
        params = _params()
        params.pop("buttonText")
        with pytest.raises(ParameterNotFoundError, match="Could not get parameter"):
            ListPayloadBuilder().build_request(StaticExecutionContext(params))
