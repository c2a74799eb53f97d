"""Cliente HTTP especializado para a Evolution API.

Estende HttpClient genérico com comportamentos específicos da Evolution:
- Header `apikey` validado antes de qualquer envio
- Montagem da URL `/message/sendList/{instance}`
- Tratamento de erros da API (status, error, response.message)
- Logging estruturado sem número de destino ou apikey
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.evolution.api_errors import EvolutionApiError, parse_evolution_error
from api.connectors.evolution.api_logging import log_api_error, log_success
from api.connectors.evolution.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import EvolutionSettings

logger: logging.Logger = logging.getLogger(__name__)


class EvolutionHttpClient(HttpClient):
    """Cliente HTTP para a Evolution API.

    Tratamento específico:
    - Rate limiting (429) e 5xx: retryable (via HttpClient)
    - 4xx: convertido em HttpError com `code=HTTP_<status>`
    - Corpo não-JSON em sucesso: devolvido como {"raw": texto}
    """

    def __init__(
        self,
        settings: EvolutionSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Evolution.

        Args:
            settings: URL base e apikey do servidor Evolution
            config: Configuração HTTP base
            transport: Transport httpx alternativo (ex: MockTransport)
        """
        super().__init__(config, transport=transport)
        self._settings = settings

    async def send_list(
        self,
        instance_name: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia mensagem de lista via Evolution API.

        Args:
            instance_name: Instância Evolution que envia a mensagem
            payload: Body JSON da lista

        Returns:
            Response JSON da Evolution

        Raises:
            ValueError: Se apikey ausente ou instância vazia
            HttpError: Se erro HTTP ou da Evolution
        """
        if not self._settings.api_key or not self._settings.api_key.strip():
            logger.error(
                "apikey ausente para send_list",
                extra={"instance": instance_name},
            )
            raise ValueError(
                "apikey é obrigatória para envio de mensagens. "
                "Verifique se EVOLUTION_API_KEY está configurado."
            )

        url = self._settings.get_send_list_endpoint(instance_name)
        headers = {
            "Content-Type": "application/json",
            "apikey": self._settings.api_key,
        }
        response = await self.post(url, json=payload, headers=headers)
        return self._process_response(response, instance_name)

    def _process_response(
        self,
        response: httpx.Response,
        instance_name: str,
    ) -> dict[str, Any]:
        """Processa response da Evolution API."""
        try:
            response_data: Any = response.json()
        except ValueError:  # JSON inválido ou corpo fora de UTF-8
            response_data = None

        api_error = parse_evolution_error(response_data, response.status_code)
        if api_error:
            self._handle_api_error(api_error, instance_name)

        log_success("POST", instance_name, response.status_code)
        if response_data is None:
            return {"raw": response.text}
        if not isinstance(response_data, dict):
            return {"data": response_data}
        return response_data

    def _handle_api_error(
        self,
        api_error: EvolutionApiError,
        instance_name: str,
    ) -> None:
        """Lida com erro da Evolution."""
        log_api_error(api_error, "POST", instance_name)
        raise HttpError(
            f"Evolution API error ({api_error.status}): {api_error.detail}",
            status_code=api_error.status,
            is_retryable=not api_error.is_permanent,
        )


def create_evolution_http_client(
    settings: EvolutionSettings | None = None,
) -> EvolutionHttpClient:
    """Factory para criar cliente Evolution com config padrão.

    Args:
        settings: EvolutionSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para a Evolution API.
    """
    # Import local para evitar dependência circular
    from config.settings import get_evolution_settings

    evolution = settings or get_evolution_settings()
    config = HttpClientConfig(
        timeout_seconds=evolution.request_timeout_seconds,
        max_retries=evolution.max_retries,
        backoff_base_seconds=evolution.backoff_base_seconds,
        verify_ssl=evolution.verify_ssl,
    )
    return EvolutionHttpClient(settings=evolution, config=config)
