"""Payloads tipados dos webhooks Steadfast.

União discriminada por `notification_type`:
- DeliveryStatusPayload: mudança de status com valores financeiros
- TrackingUpdatePayload: apenas mensagem de rastreamento
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, TypeGuard

from ..constants import WebhookDeliveryStatus, WebhookNotificationType


@dataclass(frozen=True, slots=True)
class DeliveryStatusPayload:
    """Webhook `delivery_status`.

    Atributos:
        consignment_id: ID da consignação no Steadfast
        invoice: Invoice informado na criação do pedido
        cod_amount: Valor de cobrança na entrega
        status: Um de WebhookDeliveryStatus
        delivery_charge: Taxa de entrega cobrada
        tracking_message: Mensagem legível de rastreamento
        updated_at: Timestamp no formato do provedor (não interpretado)
    """

    consignment_id: int | float
    invoice: str
    cod_amount: int | float
    status: WebhookDeliveryStatus
    delivery_charge: int | float
    tracking_message: str
    updated_at: str
    notification_type: Literal["delivery_status"] = field(
        default=WebhookNotificationType.DELIVERY_STATUS.value, init=False
    )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(frozen=True, slots=True)
class TrackingUpdatePayload:
    """Webhook `tracking_update` (sem campos financeiros nem status)."""

    consignment_id: int | float
    invoice: str
    tracking_message: str
    updated_at: str
    notification_type: Literal["tracking_update"] = field(
        default=WebhookNotificationType.TRACKING_UPDATE.value, init=False
    )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


WebhookPayload = DeliveryStatusPayload | TrackingUpdatePayload


def is_delivery_status(payload: WebhookPayload) -> TypeGuard[DeliveryStatusPayload]:
    return payload.notification_type == WebhookNotificationType.DELIVERY_STATUS


def is_tracking_update(payload: WebhookPayload) -> TypeGuard[TrackingUpdatePayload]:
    return payload.notification_type == WebhookNotificationType.TRACKING_UPDATE
