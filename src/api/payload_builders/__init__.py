"""Payload builders por API externa — construção de payloads de envio.

Estrutura:
- evolution/: Evolution API (lista interativa)
"""

__all__: list[str] = []
