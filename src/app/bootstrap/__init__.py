"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e constrói o
handler de webhook e o cliente Steadfast a partir do ambiente.

Uso:
    from app.bootstrap import initialize_app, create_webhook_handler

    initialize_app()
    handler = create_webhook_handler()
"""

from __future__ import annotations

import logging

from api.connectors.steadfast import SteadfastClient
from api.connectors.steadfast.webhook import SteadfastWebhookHandler
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    SteadfastSettings,
    get_base_settings,
    get_steadfast_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e mascaramento de credenciais.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        secrets=get_steadfast_settings().secrets,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"steadfast: {error}" for error in get_steadfast_settings().validate())

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
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def create_webhook_handler(
    settings: SteadfastSettings | None = None,
) -> SteadfastWebhookHandler:
    """Cria o handler de webhook a partir das settings (env por padrão)."""
    return SteadfastWebhookHandler.from_settings(settings or get_steadfast_settings())


def create_steadfast_client(settings: SteadfastSettings | None = None) -> SteadfastClient:
    """Cria o cliente da API a partir das settings (env por padrão)."""
    return SteadfastClient.from_settings(settings or get_steadfast_settings())


__all__ = [
    "create_steadfast_client",
    "create_webhook_handler",
    "initialize_app",
    "validate_runtime_settings",
]
