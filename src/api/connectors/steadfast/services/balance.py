"""Saldo atual da conta."""

from __future__ import annotations

from ..models import BalanceResponse
from .base import BaseService


class BalanceService(BaseService):
    async def get_balance(self) -> BalanceResponse:
        data = await self._http.get("/get_balance")
        return self._validate(BalanceResponse, data)
