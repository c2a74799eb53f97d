"""Transporte HTTP com retry para a Evolution API.

Política de retry:
- Status 429 e 5xx: retentados com backoff exponencial
- Falhas de transporte (timeout, conexão recusada ou derrubada no meio
  da requisição, resposta malformada): retentadas e, ao esgotar as
  tentativas, convertidas em HttpError com code ECONNECTION
- Demais status: devolvidos ao chamador sem retry
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

CONNECTION_ERROR_CODE = "ECONNECTION"
RETRYABLE_STATUS_FLOOR = 500
TOO_MANY_REQUESTS = 429


@dataclass
class HttpClientConfig:
    """Timeouts, retry e headers padrão do transporte."""

    timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    def backoff_for(self, attempt: int) -> float:
        return min((2**attempt) * self.backoff_base_seconds, self.backoff_max_seconds)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis.

    `code` segue o formato `HTTP_<status>` quando há status, ou um
    código simbólico (ex: ECONNECTION) para falhas de transporte.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.code = code or (f"HTTP_{status_code}" if status_code else None)


def is_retryable_status(status_code: int) -> bool:
    return status_code == TOO_MANY_REQUESTS or status_code >= RETRYABLE_STATUS_FLOOR


class HttpClient:
    """POST JSON com retry; subclasses tratam o corpo da resposta."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia POST, retentando falhas transitórias.

        Raises:
            HttpError: Status retentável após esgotar as tentativas, ou
                falha de transporte (code ECONNECTION)
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        last_attempt = self._config.max_retries

        for attempt in range(last_attempt + 1):
            try:
                response = await self._send_once(url, json, merged_headers)
            except httpx.TransportError as exc:
                logger.warning(
                    "http_transport_error",
                    extra={"attempt": attempt, "error_type": type(exc).__name__},
                )
                if attempt >= last_attempt:
                    raise HttpError(
                        str(exc) or "http_connection_error",
                        is_retryable=True,
                        code=CONNECTION_ERROR_CODE,
                    ) from exc
            else:
                if not is_retryable_status(response.status_code):
                    return response
                logger.warning(
                    "http_retryable_status",
                    extra={"attempt": attempt, "status_code": response.status_code},
                )
                if attempt >= last_attempt:
                    raise HttpError(
                        "http_retryable_status",
                        status_code=response.status_code,
                        is_retryable=True,
                    )
            await self._backoff(attempt)

        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def _send_once(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            return await client.post(url, json=payload, headers=headers)

    async def _backoff(self, attempt: int) -> None:
        delay = self._config.backoff_for(attempt)
        logger.info("http_backoff", extra={"backoff_seconds": delay, "attempt": attempt})
        await asyncio.sleep(delay)
