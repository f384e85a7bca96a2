"""Conector Steadfast: adapter de borda para a API do courier.

Este módulo é o único ponto de IO com o Steadfast.
Responsabilidades:
- Cliente HTTP autenticado (Api-Key / Secret-Key)
- Serviços por endpoint (pedidos, status, saldo, devoluções, pagamentos, delegacias)
- Validação de campos de pedido
- Webhook (autenticação Bearer, parsing tipado, despacho)
"""

from .client import SteadfastClient
from .constants import (
    BASE_URL,
    MAX_BULK_ORDERS,
    DeliveryStatus,
    DeliveryType,
    ReturnStatus,
    WebhookDeliveryStatus,
    WebhookEvent,
    WebhookNotificationType,
)
from .errors import ErrorKind, SteadfastError
from .http_client import HttpClientConfig, SteadfastHttpClient
from .models import BulkOrderItem, CreateOrderRequest, CreateReturnRequest
from .webhook import SteadfastWebhookHandler

__all__ = [
    "BASE_URL",
    "MAX_BULK_ORDERS",
    "BulkOrderItem",
    "CreateOrderRequest",
    "CreateReturnRequest",
    "DeliveryStatus",
    "DeliveryType",
    "ErrorKind",
    "HttpClientConfig",
    "ReturnStatus",
    "SteadfastClient",
    "SteadfastError",
    "SteadfastHttpClient",
    "SteadfastWebhookHandler",
    "WebhookDeliveryStatus",
    "WebhookEvent",
    "WebhookNotificationType",
]
