"""Pagamentos consolidados e seus detalhes."""

from __future__ import annotations

from pydantic import TypeAdapter

from ..models import Payment
from .base import BaseService, require_positive_int

_PAYMENT_LIST = TypeAdapter(list[Payment])


class PaymentService(BaseService):
    async def get_payments(self) -> list[Payment]:
        data = await self._http.get("/payments")
        return self._validate(_PAYMENT_LIST, data)

    async def get_payment(self, payment_id: int) -> Payment:
        """Detalhe de um pagamento, incluindo as consignações liquidadas."""
        require_positive_int(payment_id, "payment_id")
        data = await self._http.get(f"/payments/{payment_id}")
        return self._validate(Payment, data)
