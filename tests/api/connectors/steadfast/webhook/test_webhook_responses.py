"""Testes das respostas do webhook e dos payloads tipados."""

from __future__ import annotations

import dataclasses

import pytest

from api.connectors.steadfast.constants import WebhookDeliveryStatus
from api.connectors.steadfast.webhook.models import (
    DeliveryStatusPayload,
    TrackingUpdatePayload,
    is_delivery_status,
    is_tracking_update,
)
from api.connectors.steadfast.webhook.responses import (
    DEFAULT_SUCCESS_MESSAGE,
    create_error_response,
    create_success_response,
)


def test_success_response_defaults() -> None:
    response = create_success_response()
    assert response.http_status == 200
    assert response.to_dict() == {"status": "success", "message": DEFAULT_SUCCESS_MESSAGE}
    assert DEFAULT_SUCCESS_MESSAGE == "Webhook received successfully."


def test_success_response_custom_message() -> None:
    assert create_success_response("ok").to_dict()["message"] == "ok"


def test_error_response() -> None:
    response = create_error_response("Invalid authentication token")
    assert response.http_status == 400
    assert response.to_dict() == {"status": "error", "message": "Invalid authentication token"}


def test_responses_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        create_error_response("x").message = "y"  # type: ignore[misc]


def test_payload_type_guards() -> None:
    delivery = DeliveryStatusPayload(
        consignment_id=1,
        invoice="INV-1",
        cod_amount=10,
        status=WebhookDeliveryStatus.PENDING,
        delivery_charge=5,
        tracking_message="pending",
        updated_at="2025-01-01",
    )
    tracking = TrackingUpdatePayload(
        consignment_id=1, invoice="INV-1", tracking_message="hub", updated_at="2025-01-01"
    )

    assert is_delivery_status(delivery) and not is_tracking_update(delivery)
    assert is_tracking_update(tracking) and not is_delivery_status(tracking)
    assert delivery.to_dict()["notification_type"] == "delivery_status"
    assert tracking.to_dict() == {
        "consignment_id": 1,
        "invoice": "INV-1",
        "tracking_message": "hub",
        "updated_at": "2025-01-01",
        "notification_type": "tracking_update",
    }
