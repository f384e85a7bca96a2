"""Criação de pedidos (individual e em lote)."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter

from ..constants import MAX_BULK_ORDERS
from ..errors import SteadfastError
from ..models import BulkOrderItemResult, CreateOrderRequest, CreateOrderResponse
from ..validation import validate_order
from .base import BaseService

logger = logging.getLogger(__name__)

_BULK_RESULTS = TypeAdapter(list[BulkOrderItemResult])


class OrderService(BaseService):
    """Endpoints /create_order e /create_order/bulk-order."""

    async def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        """Valida e cria um pedido.

        Raises:
            SteadfastError: VALIDATION antes do envio, ou erro de transporte/API
        """
        validate_order(request)
        data = await self._http.post("/create_order", request.to_payload())
        return self._validate(CreateOrderResponse, data)

    async def create_bulk_orders(
        self, orders: Sequence[CreateOrderRequest]
    ) -> list[BulkOrderItemResult]:
        """Cria até 500 pedidos numa única chamada.

        A API espera o lote serializado como string JSON no campo `data`.
        """
        if isinstance(orders, str | bytes) or not isinstance(orders, Sequence):
            raise SteadfastError.validation("orders must be a list", field="orders")
        if not orders:
            raise SteadfastError.validation("orders list cannot be empty", field="orders")
        if len(orders) > MAX_BULK_ORDERS:
            raise SteadfastError.validation(
                f"Maximum {MAX_BULK_ORDERS} orders allowed per bulk request", field="orders"
            )

        for order in orders:
            validate_order(order)

        payload = {"data": json.dumps([order.to_payload() for order in orders])}
        data = await self._http.post("/create_order/bulk-order", payload)
        results = self._validate(_BULK_RESULTS, data)

        failed = sum(1 for item in results if item.status == "error")
        if failed:
            logger.warning(
                "steadfast_bulk_order_partial_failure",
                extra={"total": len(results), "failed": failed},
            )
        return results
