"""Parse e validação estrita dos payloads de webhook.

Ordem fixa (fail-fast, sem coerção de tipos):
1. objeto JSON
2. campos comuns: notification_type, consignment_id, invoice, updated_at
3. campos específicos do notification_type

A ordem determina a mensagem de erro, então não deve ser alterada.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from ..constants import WebhookDeliveryStatus, WebhookNotificationType
from ..errors import SteadfastError
from .models import DeliveryStatusPayload, TrackingUpdatePayload, WebhookPayload

_PAYLOAD_PREFIX = "Invalid webhook payload"
_DELIVERY_PREFIX = "Invalid delivery_status webhook"
_TRACKING_PREFIX = "Invalid tracking_update webhook"

VALID_DELIVERY_STATUSES: tuple[str, ...] = tuple(status.value for status in WebhookDeliveryStatus)


def _is_number(value: object) -> bool:
    # bool é subclasse de int, mas JSON true/false não é número; NaN e Infinity também não
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _require_string(payload: Mapping[str, object], name: str, prefix: str) -> str:
    value = payload.get(name)
    if not value or not isinstance(value, str):
        raise SteadfastError.validation(
            f"{prefix}: {name} is required and must be a string", field=name
        )
    return value


def _require_number(
    payload: Mapping[str, object],
    name: str,
    prefix: str,
    *,
    allow_zero: bool = True,
) -> int | float:
    value = payload.get(name)
    if not _is_number(value) or (not allow_zero and not value):
        raise SteadfastError.validation(
            f"{prefix}: {name} is required and must be a number", field=name
        )
    return value  # type: ignore[return-value]


def parse_webhook_payload(data: object) -> WebhookPayload:
    """Valida um corpo JSON já decodificado e retorna o payload tipado.

    Args:
        data: Corpo decodificado pelo host (formato não confiável)

    Raises:
        SteadfastError: kind VALIDATION com o campo inválido em `field`

    Returns:
        DeliveryStatusPayload ou TrackingUpdatePayload
    """
    if not isinstance(data, Mapping):
        raise SteadfastError.validation(f"{_PAYLOAD_PREFIX}: must be an object")

    if not data.get("notification_type") or not isinstance(data.get("notification_type"), str):
        raise SteadfastError.validation(
            f"{_PAYLOAD_PREFIX}: notification_type is required",
            field="notification_type",
        )
    notification_type: str = data["notification_type"]

    # consignment_id 0 nunca é emitido pelo provedor
    _require_number(data, "consignment_id", _PAYLOAD_PREFIX, allow_zero=False)
    _require_string(data, "invoice", _PAYLOAD_PREFIX)
    _require_string(data, "updated_at", _PAYLOAD_PREFIX)

    if notification_type == WebhookNotificationType.DELIVERY_STATUS:
        return _parse_delivery_status(data)
    if notification_type == WebhookNotificationType.TRACKING_UPDATE:
        return _parse_tracking_update(data)

    raise SteadfastError.validation(
        f"{_PAYLOAD_PREFIX}: unknown notification_type: {notification_type}",
        field="notification_type",
    )


def _parse_delivery_status(data: Mapping[str, object]) -> DeliveryStatusPayload:
    cod_amount = _require_number(data, "cod_amount", _DELIVERY_PREFIX)
    status = _require_string(data, "status", _DELIVERY_PREFIX)
    if status not in VALID_DELIVERY_STATUSES:
        raise SteadfastError.validation(
            f"{_DELIVERY_PREFIX}: status must be one of {', '.join(VALID_DELIVERY_STATUSES)}",
            field="status",
        )
    delivery_charge = _require_number(data, "delivery_charge", _DELIVERY_PREFIX)
    tracking_message = _require_string(data, "tracking_message", _DELIVERY_PREFIX)

    return DeliveryStatusPayload(
        consignment_id=data["consignment_id"],  # type: ignore[arg-type]
        invoice=data["invoice"],  # type: ignore[arg-type]
        cod_amount=cod_amount,
        status=WebhookDeliveryStatus(status),
        delivery_charge=delivery_charge,
        tracking_message=tracking_message,
        updated_at=data["updated_at"],  # type: ignore[arg-type]
    )


def _parse_tracking_update(data: Mapping[str, object]) -> TrackingUpdatePayload:
    tracking_message = _require_string(data, "tracking_message", _TRACKING_PREFIX)

    return TrackingUpdatePayload(
        consignment_id=data["consignment_id"],  # type: ignore[arg-type]
        invoice=data["invoice"],  # type: ignore[arg-type]
        tracking_message=tracking_message,
        updated_at=data["updated_at"],  # type: ignore[arg-type]
    )
