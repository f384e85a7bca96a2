"""Entrypoint da aplicação.

Expõe a factory ASGI (FastAPI) com health check e webhook do Steadfast.

Uso (produção):
    uvicorn app.app:create_app --factory --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_webhook_handler, initialize_app, validate_runtime_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from api.connectors.steadfast.webhook import SteadfastWebhookHandler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configuração no startup e registra o ciclo de vida."""
    logger.info("app_starting")
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down")


def create_app(handler: SteadfastWebhookHandler | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        handler: Handler de webhook pronto (testes). Sem ele, inicializa
            logging e constrói o handler a partir do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    if handler is None:
        initialize_app()
        handler = create_webhook_handler()

    fastapi_app = FastAPI(
        title="Steadfast Courier Integration",
        description="Cliente e webhook do courier Steadfast",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.webhook_handler = handler
    fastapi_app.include_router(create_api_router(handler))

    logger.info("app_configured", extra={"skip_auth": handler.skip_auth})
    return fastapi_app


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
