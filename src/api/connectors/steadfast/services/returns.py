"""Solicitações de devolução: criação, detalhe e listagem."""

from __future__ import annotations

from pydantic import TypeAdapter

from ..errors import SteadfastError
from ..models import CreateReturnRequest, ReturnRequest
from .base import BaseService, require_positive_int

_RETURN_LIST = TypeAdapter(list[ReturnRequest])


class ReturnService(BaseService):
    async def create_return_request(self, request: CreateReturnRequest) -> ReturnRequest:
        """Cria devolução identificada por consignment_id, invoice ou tracking_code."""
        if not request.has_identifier():
            raise SteadfastError.validation(
                "At least one of consignment_id, invoice, or tracking_code must be provided"
            )
        data = await self._http.post("/create_return_request", request.to_payload())
        return self._validate(ReturnRequest, data)

    async def get_return_request(self, return_request_id: int) -> ReturnRequest:
        require_positive_int(return_request_id, "id")
        data = await self._http.get(f"/get_return_request/{return_request_id}")
        return self._validate(ReturnRequest, data)

    async def get_return_requests(self) -> list[ReturnRequest]:
        data = await self._http.get("/get_return_requests")
        return self._validate(_RETURN_LIST, data)
