"""Consulta de status de entrega por três identificadores."""

from __future__ import annotations

from urllib.parse import quote

from ..models import DeliveryStatusResponse
from .base import BaseService, require_non_empty_str, require_positive_int


class StatusService(BaseService):
    async def get_status_by_consignment_id(self, consignment_id: int) -> DeliveryStatusResponse:
        require_positive_int(consignment_id, "consignment_id")
        data = await self._http.get(f"/status_by_cid/{consignment_id}")
        return self._validate(DeliveryStatusResponse, data)

    async def get_status_by_invoice(self, invoice: str) -> DeliveryStatusResponse:
        require_non_empty_str(invoice, "invoice")
        data = await self._http.get(f"/status_by_invoice/{quote(invoice, safe='')}")
        return self._validate(DeliveryStatusResponse, data)

    async def get_status_by_tracking_code(self, tracking_code: str) -> DeliveryStatusResponse:
        require_non_empty_str(tracking_code, "tracking_code")
        data = await self._http.get(f"/status_by_trackingcode/{quote(tracking_code, safe='')}")
        return self._validate(DeliveryStatusResponse, data)
