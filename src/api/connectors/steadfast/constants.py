"""Constantes da API Steadfast (portal Packzy).

Enums de status de entrega, devoluções, tipos de notificação de webhook
e nomes de eventos emitidos pelo handler de webhook.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

BASE_URL: str = "https://portal.packzy.com/api/v1"

DEFAULT_TIMEOUT_SECONDS: float = 30.0

# Limite imposto pela API por chamada de bulk
MAX_BULK_ORDERS: int = 500


class DeliveryStatus(StrEnum):
    """Status de entrega retornados pelos endpoints de consulta."""

    PENDING = "pending"
    DELIVERED_APPROVAL_PENDING = "delivered_approval_pending"
    PARTIAL_DELIVERED_APPROVAL_PENDING = "partial_delivered_approval_pending"
    CANCELLED_APPROVAL_PENDING = "cancelled_approval_pending"
    UNKNOWN_APPROVAL_PENDING = "unknown_approval_pending"
    DELIVERED = "delivered"
    PARTIAL_DELIVERED = "partial_delivered"
    CANCELLED = "cancelled"
    HOLD = "hold"
    IN_REVIEW = "in_review"
    UNKNOWN = "unknown"


class ReturnStatus(StrEnum):
    """Status de uma solicitação de devolução."""

    PENDING = "pending"
    APPROVED = "approved"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DeliveryType(IntEnum):
    """Modalidade de entrega aceita na criação de pedidos."""

    HOME_DELIVERY = 0
    POINT_DELIVERY = 1


class WebhookDeliveryStatus(StrEnum):
    """Subconjunto de status enviados em webhooks de delivery_status."""

    PENDING = "pending"
    DELIVERED = "delivered"
    PARTIAL_DELIVERED = "partial_delivered"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class WebhookNotificationType(StrEnum):
    """Discriminante `notification_type` dos payloads de webhook."""

    DELIVERY_STATUS = "delivery_status"
    TRACKING_UPDATE = "tracking_update"


class WebhookEvent(StrEnum):
    """Nomes dos eventos emitidos pelo SteadfastWebhookHandler."""

    WEBHOOK = "steadfast_webhook"
    DELIVERY_STATUS = "steadfast_delivery_status"
    TRACKING_UPDATE = "steadfast_tracking_update"
    ERROR = "steadfast_webhook_error"
