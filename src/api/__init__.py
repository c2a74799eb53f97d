"""API — camada de borda e adapters de APIs externas.

Responsabilidades:
- Construir payloads para APIs externas
- Executar chamadas HTTP e traduzir erros de transporte

Subpastas:
- connectors/: adapters HTTP por API
- payload_builders/: construção de payloads

NÃO PODE conter: orquestração de use cases nem regras do host.
"""
