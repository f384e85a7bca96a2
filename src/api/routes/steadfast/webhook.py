"""Endpoint de webhook do Steadfast.

Endpoint:
- POST /webhook/steadfast: notificações delivery_status e tracking_update

O Steadfast autentica com `Authorization: Bearer <api_key>`. Toda a
validação acontece no SteadfastWebhookHandler; a rota só decodifica o
JSON, propaga o correlation_id e traduz o resultado em HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.observability import bind_correlation_id

if TYPE_CHECKING:
    from api.connectors.steadfast.webhook import SteadfastWebhookHandler

logger = logging.getLogger(__name__)


async def _read_json(request: Request) -> Any:
    """Corpo JSON decodificado; None quando ausente ou inválido."""
    try:
        return await request.json()
    except ValueError:
        logger.info("webhook_body_not_json", extra={"channel": "steadfast"})
        return None


def create_webhook_router(handler: SteadfastWebhookHandler) -> APIRouter:
    """Cria o router do webhook ligado a um handler já configurado.

    Args:
        handler: Handler com credencial e callbacks registrados.

    Returns:
        APIRouter com POST "/".
    """
    router = APIRouter()

    @router.post("/", response_model=None)
    async def receive_webhook(request: Request) -> JSONResponse:
        with bind_correlation_id(request.headers.get("x-correlation-id")):
            body = await _read_json(request)
            result = await handler.handle(body, request.headers.get("authorization"))
            return JSONResponse(result.to_dict(), status_code=result.http_status)

    return router
