"""Conector Evolution API - adapter de borda para envio de listas.

Este módulo é o único ponto de IO com o servidor Evolution.
Responsabilidades:
- HTTP client com retry/backoff
- Parsing de erros da API
- Logging sem dados sensíveis
"""

from .api_errors import EvolutionApiError, is_permanent_error, parse_evolution_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import EvolutionHttpClient, create_evolution_http_client

__all__ = [
    "EvolutionApiError",
    "EvolutionHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "create_evolution_http_client",
    "is_permanent_error",
    "parse_evolution_error",
]
