"""Handler de webhooks Steadfast.

Fluxo de `handle()`:
1. Autenticação Bearer (exceto com skip_auth)
2. Parse/validação do payload
3. Evento genérico `steadfast_webhook`
4. Evento com o próprio notification_type
5. Callback tipado (aguardado) + evento específico do tipo
6. Resposta de sucesso

Qualquer falha vira WebhookErrorResponse + evento `steadfast_webhook_error`.
`handle()` nunca levanta exceção.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from ..constants import WebhookEvent
from ..errors import ErrorKind, SteadfastError
from .auth import extract_bearer_token, verify_bearer_token
from .events import EventChannel, Listener
from .models import (
    DeliveryStatusPayload,
    TrackingUpdatePayload,
    is_delivery_status,
    is_tracking_update,
)
from .parser import parse_webhook_payload
from .responses import WebhookResponse, create_error_response, create_success_response

if TYPE_CHECKING:
    from config.settings import SteadfastSettings

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid authentication token"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

DeliveryStatusCallback = Callable[[DeliveryStatusPayload], Awaitable[None] | None]
TrackingUpdateCallback = Callable[[TrackingUpdatePayload], Awaitable[None] | None]


class SteadfastWebhookHandler:
    """Autentica, valida e despacha webhooks do Steadfast.

    Args:
        api_key: Credencial esperada no header Bearer
        skip_auth: Desativa autenticação (somente desenvolvimento/testes)
        events: Canal de eventos compartilhado (opcional)

    Raises:
        SteadfastError: kind CONFIGURATION se api_key vazia sem skip_auth
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        skip_auth: bool = False,
        events: EventChannel | None = None,
    ) -> None:
        if not api_key and not skip_auth:
            raise SteadfastError(
                "api_key is required when skip_auth is false",
                ErrorKind.CONFIGURATION,
            )
        self._api_key = api_key or ""
        self._skip_auth = skip_auth
        self._delivery_status_callback: DeliveryStatusCallback | None = None
        self._tracking_update_callback: TrackingUpdateCallback | None = None
        self.events = events or EventChannel()

        if skip_auth:
            logger.warning(
                "webhook_auth_disabled",
                extra={"component": "steadfast_webhook"},
            )

    @classmethod
    def from_settings(cls, settings: SteadfastSettings) -> SteadfastWebhookHandler:
        return cls(settings.webhook_credential, skip_auth=settings.webhook_skip_auth)

    @property
    def skip_auth(self) -> bool:
        return self._skip_auth

    def on_delivery_status(self, callback: DeliveryStatusCallback) -> None:
        """Registra o callback de delivery_status (substitui o anterior)."""
        self._delivery_status_callback = callback

    def on_tracking_update(self, callback: TrackingUpdateCallback) -> None:
        """Registra o callback de tracking_update (substitui o anterior)."""
        self._tracking_update_callback = callback

    def on(self, event: str, listener: Listener) -> Listener:
        return self.events.subscribe(event, listener)

    def off(self, event: str, listener: Listener) -> bool:
        return self.events.unsubscribe(event, listener)

    async def handle(self, body: object, auth_header: str | None = None) -> WebhookResponse:
        """Processa um webhook recebido.

        Args:
            body: Corpo JSON já decodificado pelo host
            auth_header: Valor do header Authorization (pode ser None)

        Returns:
            WebhookSuccessResponse ou WebhookErrorResponse
        """
        try:
            if not self._skip_auth:
                token = extract_bearer_token(auth_header)
                if not verify_bearer_token(token, self._api_key):
                    return self._reject(
                        SteadfastError(
                            INVALID_TOKEN_MESSAGE,
                            ErrorKind.AUTHENTICATION,
                            status_code=401,
                        )
                    )

            payload = parse_webhook_payload(body)
        except SteadfastError as exc:
            return self._reject(exc)
        except Exception as exc:
            # Mapping customizado do host pode falhar durante o parse
            logger.warning(
                "webhook_parse_failed",
                extra={"component": "steadfast_webhook", "error_type": type(exc).__name__},
            )
            return self._fail(exc, str(exc) or UNKNOWN_ERROR_MESSAGE)

        try:
            await self._dispatch(payload)
        except Exception as exc:
            logger.warning(
                "webhook_callback_failed",
                extra={
                    "component": "steadfast_webhook",
                    "notification_type": payload.notification_type,
                    "consignment_id": payload.consignment_id,
                    "error_type": type(exc).__name__,
                },
            )
            return self._fail(exc, str(exc) or UNKNOWN_ERROR_MESSAGE)

        logger.info(
            "webhook_processed",
            extra={
                "component": "steadfast_webhook",
                "notification_type": payload.notification_type,
                "consignment_id": payload.consignment_id,
            },
        )
        return create_success_response()

    async def _dispatch(self, payload: DeliveryStatusPayload | TrackingUpdatePayload) -> None:
        self.events.emit(WebhookEvent.WEBHOOK, payload)
        self.events.emit(payload.notification_type, payload)

        if is_delivery_status(payload):
            await _invoke(self._delivery_status_callback, payload)
            self.events.emit(WebhookEvent.DELIVERY_STATUS, payload)
        elif is_tracking_update(payload):
            await _invoke(self._tracking_update_callback, payload)
            self.events.emit(WebhookEvent.TRACKING_UPDATE, payload)

    def _reject(self, error: SteadfastError) -> WebhookResponse:
        # Nunca incluir o token recebido no log
        logger.warning(
            "webhook_rejected",
            extra={
                "component": "steadfast_webhook",
                "error_kind": error.kind.value,
                "field": error.field,
            },
        )
        return self._fail(error, error.message)

    def _fail(self, error: BaseException, message: str) -> WebhookResponse:
        try:
            self.events.emit(WebhookEvent.ERROR, error)
        except Exception:
            logger.exception(
                "webhook_error_listener_failed",
                extra={"component": "steadfast_webhook"},
            )
        return create_error_response(message)


async def _invoke(callback: Callable[[Any], Any] | None, payload: object) -> None:
    if callback is None:
        return
    result = callback(payload)
    if inspect.isawaitable(result):
        await result
