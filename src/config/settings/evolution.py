"""Settings específicas da Evolution API.

Credenciais e parâmetros de transporte do conector Evolution.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Rota do endpoint de envio de lista (instância no final)
SEND_LIST_PATH: str = "/message/sendList"


@dataclass(frozen=True)
class EvolutionSettings:
    """Configurações do conector Evolution API.

    Attributes:
        api_url: URL base do servidor Evolution (sem barra final)
        api_key: Chave global enviada no header `apikey`
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de novas tentativas em erro transitório
        backoff_base_seconds: Base do backoff exponencial
        verify_ssl: Valida certificado TLS do servidor
    """

    # Credenciais
    api_url: str = ""
    api_key: str = ""

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base_seconds: float = 2.0
    verify_ssl: bool = True

    @property
    def base_url(self) -> str:
        """URL base normalizada (sem barra final)."""
        return self.api_url.rstrip("/")

    def get_send_list_endpoint(self, instance_name: str) -> str:
        """Retorna URL para envio de lista.

        Args:
            instance_name: Nome da instância conectada na Evolution.

        Returns:
            URL completa no formato: {api_url}/message/sendList/{instance}

        Raises:
            ValueError: Se instance_name vazio.
        """
        if not instance_name or not instance_name.strip():
            raise ValueError("instance_name é obrigatório")
        return f"{self.base_url}{SEND_LIST_PATH}/{instance_name.strip()}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Evolution API.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_url:
            errors.append("EVOLUTION_API_URL não configurado")
        elif not self.api_url.startswith(("http://", "https://")):
            errors.append("EVOLUTION_API_URL deve começar com http:// ou https://")

        if not self.api_key:
            errors.append("EVOLUTION_API_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("EVOLUTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("EVOLUTION_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> EvolutionSettings:
    """Carrega EvolutionSettings a partir de variáveis de ambiente."""
    return EvolutionSettings(
        api_url=os.getenv("EVOLUTION_API_URL", ""),
        api_key=os.getenv("EVOLUTION_API_KEY", ""),
        request_timeout_seconds=float(
            os.getenv("EVOLUTION_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("EVOLUTION_MAX_RETRIES", "2")),
        backoff_base_seconds=float(os.getenv("EVOLUTION_BACKOFF_BASE_SECONDS", "2")),
        verify_ssl=os.getenv("EVOLUTION_VERIFY_SSL", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_evolution_settings() -> EvolutionSettings:
    """Retorna instância cacheada de EvolutionSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
