"""Rotas do Steadfast."""

from api.routes.steadfast.webhook import create_webhook_router

__all__ = ["create_webhook_router"]
