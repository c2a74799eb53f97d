"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas aos protocolos do use case.

Uso:
    from app.bootstrap import initialize_app, create_send_list_use_case

    initialize_app()
    use_case = create_send_list_use_case()
    items = await use_case.execute(context)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_evolution_settings

if TYPE_CHECKING:
    from app.use_cases.evolution import SendListMessageUseCase
    from config.settings import EvolutionSettings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(log_level: str | None = None) -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Args:
        log_level: Sobrescreve LOG_LEVEL do ambiente quando informado.
    """
    base = get_base_settings()
    configure_logging(
        level=log_level or base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"evolution: {error}" for error in get_evolution_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def create_send_list_use_case(
    settings: EvolutionSettings | None = None,
) -> SendListMessageUseCase:
    """Monta o use case com builder e cliente HTTP concretos."""
    from api.connectors.evolution import create_evolution_http_client
    from api.payload_builders.evolution import ListPayloadBuilder
    from app.use_cases.evolution import SendListMessageUseCase

    return SendListMessageUseCase(
        builder=ListPayloadBuilder(),
        client=create_evolution_http_client(settings),
    )
