"""Testes para parsing de erros da Evolution API."""

from __future__ import annotations

import pytest

from api.connectors.evolution import is_permanent_error, parse_evolution_error


class TestParseEvolutionError:
    """Testes para parse_evolution_error."""

    def test_success_status_returns_none(self) -> None:
        """Status < 400 não é erro."""
        assert parse_evolution_error({"status": "PENDING"}, 201) is None

    def test_nested_messages_are_flattened(self) -> None:
        """Mensagens em listas aninhadas são achatadas."""
        data = {
            "status": 400,
            "error": "Bad Request",
            "response": {"message": [["number is required"], "sections is empty"]},
        }
        error = parse_evolution_error(data, 400)
        assert error is not None
        assert error.messages == ("number is required", "sections is empty")
        assert error.detail == "number is required; sections is empty"
        assert error.is_permanent is True

    def test_non_json_body_uses_http_status(self) -> None:
        """Corpo não-JSON usa o status HTTP e texto padrão."""
        error = parse_evolution_error(None, 401)
        assert error is not None
        assert error.status == 401
        assert error.detail == "Erro desconhecido"

    def test_top_level_message(self) -> None:
        """`message` na raiz é aceito quando não há `response`."""
        error = parse_evolution_error({"message": "Unauthorized"}, 401)
        assert error is not None
        assert error.detail == "Unauthorized"


class TestIsPermanentError:
    """Testes para is_permanent_error."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [(400, True), (401, True), (404, True), (429, False), (500, False), (503, False)],
    )
    def test_classification(self, status: int, expected: bool) -> None:
        """4xx (exceto 429) é permanente; 429 e 5xx são transitórios."""
        assert is_permanent_error(status) is expected
