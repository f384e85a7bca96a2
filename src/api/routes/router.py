"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(webhook_handler))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.steadfast import create_webhook_router

if TYPE_CHECKING:
    from api.connectors.steadfast.webhook import SteadfastWebhookHandler


def create_api_router(webhook_handler: SteadfastWebhookHandler) -> APIRouter:
    """Cria router principal com health e webhook do Steadfast.

    Args:
        webhook_handler: Handler que processa POST /webhook/steadfast.
    """
    api_router = APIRouter()

    # Health checks na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        create_webhook_router(webhook_handler),
        prefix="/webhook/steadfast",
        tags=["steadfast"],
    )

    return api_router
