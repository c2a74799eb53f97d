"""Connectors por API externa — adapters de borda.

Estrutura:
- evolution/: Evolution API (envio de lista interativa)
"""

__all__: list[str] = []
