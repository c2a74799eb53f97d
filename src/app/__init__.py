"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- infra/: implementações concretas (host em memória)
- protocols/: contratos/interfaces
- domain/: modelos de domínio
- observability/: correlation_id para logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta; utils apoia.
"""
