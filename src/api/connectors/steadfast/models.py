"""Contratos de requisição e resposta da API Steadfast.

Requisições: dataclasses imutáveis com `to_payload()` (omite campos None).
Respostas: modelos pydantic tolerantes a campos novos do provedor.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True, slots=True)
class CreateOrderRequest:
    """Pedido de entrega (também usado como item de bulk).

    Atributos:
        invoice: Identificador único do pedido no lojista (alfanumérico, - e _)
        recipient_name: Nome do destinatário (até 100 caracteres)
        recipient_phone: Telefone com 11 dígitos
        recipient_address: Endereço (até 250 caracteres)
        cod_amount: Valor a cobrar na entrega (>= 0)
        delivery_type: 0 entrega em domicílio, 1 retirada em ponto
    """

    invoice: str
    recipient_name: str
    recipient_phone: str
    recipient_address: str
    cod_amount: float
    alternative_phone: str | None = None
    recipient_email: str | None = None
    note: str | None = None
    item_description: str | None = None
    total_lot: int | None = None
    delivery_type: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return _drop_none(asdict(self))


BulkOrderItem = CreateOrderRequest


@dataclass(frozen=True, slots=True)
class CreateReturnRequest:
    """Solicitação de devolução; exige ao menos um identificador."""

    consignment_id: int | None = None
    invoice: str | None = None
    tracking_code: str | None = None
    reason: str | None = None

    def has_identifier(self) -> bool:
        return bool(self.consignment_id or self.invoice or self.tracking_code)

    def to_payload(self) -> dict[str, Any]:
        return _drop_none(asdict(self))


class Consignment(BaseModel):
    """Consignação criada pela API."""

    model_config = ConfigDict(extra="allow")

    consignment_id: int
    invoice: str
    tracking_code: str
    recipient_name: str
    recipient_phone: str
    recipient_address: str
    cod_amount: float
    status: str
    note: str | None = None
    created_at: str
    updated_at: str


class CreateOrderResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: int
    message: str
    consignment: Consignment


class BulkOrderItemResult(BaseModel):
    """Resultado por item de um bulk order."""

    model_config = ConfigDict(extra="allow")

    invoice: str
    recipient_name: str | None = None
    recipient_address: str | None = None
    recipient_phone: str | None = None
    cod_amount: float | str | None = None
    note: str | None = None
    consignment_id: int | None = None
    tracking_code: str | None = None
    status: Literal["success", "error"]


class DeliveryStatusResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: int
    delivery_status: str


class BalanceResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: int
    current_balance: float


class ReturnRequest(BaseModel):
    """Solicitação de devolução retornada pela API."""

    model_config = ConfigDict(extra="allow")

    id: int
    user_id: int
    consignment_id: int
    reason: str | None = None
    status: str
    created_at: str
    updated_at: str


class PaymentConsignment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    consignment_id: int
    invoice: str
    tracking_code: str
    cod_amount: float
    delivery_charge: float
    status: str


class Payment(BaseModel):
    """Pagamento consolidado; `consignments` vem só no detalhe."""

    model_config = ConfigDict(extra="allow")

    id: int
    amount: float
    status: str
    created_at: str
    updated_at: str
    consignments: list[PaymentConsignment] | None = None


class PoliceStation(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    address: str | None = None
    phone: str | None = None
