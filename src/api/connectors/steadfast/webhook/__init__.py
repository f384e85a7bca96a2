"""Webhook Steadfast: autenticação Bearer, parsing tipado e despacho."""

from .adapters import (
    WebhookReply,
    WebhookRequest,
    create_generic_webhook_handler,
    get_authorization_header,
    render_http_response,
)
from .auth import extract_bearer_token, verify_bearer_token
from .events import EventChannel
from .handler import SteadfastWebhookHandler
from .models import (
    DeliveryStatusPayload,
    TrackingUpdatePayload,
    WebhookPayload,
    is_delivery_status,
    is_tracking_update,
)
from .parser import parse_webhook_payload
from .responses import (
    WebhookErrorResponse,
    WebhookResponse,
    WebhookSuccessResponse,
    create_error_response,
    create_success_response,
)

__all__ = [
    "DeliveryStatusPayload",
    "EventChannel",
    "SteadfastWebhookHandler",
    "TrackingUpdatePayload",
    "WebhookErrorResponse",
    "WebhookPayload",
    "WebhookReply",
    "WebhookRequest",
    "WebhookResponse",
    "WebhookSuccessResponse",
    "create_error_response",
    "create_generic_webhook_handler",
    "create_success_response",
    "extract_bearer_token",
    "get_authorization_header",
    "is_delivery_status",
    "is_tracking_update",
    "parse_webhook_payload",
    "render_http_response",
    "verify_bearer_token",
]
