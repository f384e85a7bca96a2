"""Validadores de campos de pedido antes do envio à API.

Cada validador levanta SteadfastError (kind VALIDATION) com o campo
inválido; não há coerção nem normalização de valores.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from .errors import SteadfastError

if TYPE_CHECKING:
    from .models import CreateOrderRequest

MAX_RECIPIENT_NAME_LENGTH = 100
MAX_RECIPIENT_ADDRESS_LENGTH = 250

_PHONE_RE = re.compile(r"^\d{11}$")
_INVOICE_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_phone_number(phone: str, field_name: str = "phone") -> None:
    """Telefone de Bangladesh: exatamente 11 dígitos (ex: 01712345678)."""
    if not phone or not isinstance(phone, str):
        raise SteadfastError.validation(
            f"{field_name} is required and must be a string", field=field_name
        )
    if not _PHONE_RE.match(phone):
        raise SteadfastError.validation(
            f"{field_name} must be exactly 11 digits, got: {phone}", field=field_name
        )


def validate_invoice(invoice: str) -> None:
    if not invoice or not isinstance(invoice, str):
        raise SteadfastError.validation("invoice is required and must be a string", field="invoice")
    if not _INVOICE_RE.match(invoice):
        raise SteadfastError.validation(
            "invoice must be alpha-numeric and can include hyphens and underscores, "
            f"got: {invoice}",
            field="invoice",
        )


def validate_recipient_name(name: str) -> None:
    if not name or not isinstance(name, str):
        raise SteadfastError.validation(
            "recipient_name is required and must be a string", field="recipient_name"
        )
    if len(name) > MAX_RECIPIENT_NAME_LENGTH:
        raise SteadfastError.validation(
            f"recipient_name must be within {MAX_RECIPIENT_NAME_LENGTH} characters, "
            f"got {len(name)} characters",
            field="recipient_name",
        )


def validate_recipient_address(address: str) -> None:
    if not address or not isinstance(address, str):
        raise SteadfastError.validation(
            "recipient_address is required and must be a string", field="recipient_address"
        )
    if len(address) > MAX_RECIPIENT_ADDRESS_LENGTH:
        raise SteadfastError.validation(
            f"recipient_address must be within {MAX_RECIPIENT_ADDRESS_LENGTH} characters, "
            f"got {len(address)} characters",
            field="recipient_address",
        )


def validate_cod_amount(amount: float) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int | float) or math.isnan(amount):
        raise SteadfastError.validation("cod_amount must be a valid number", field="cod_amount")
    if amount < 0:
        raise SteadfastError.validation(
            f"cod_amount cannot be less than 0, got: {amount}", field="cod_amount"
        )


def validate_email(email: str | None) -> None:
    """E-mail é opcional; quando informado precisa ter formato válido."""
    if email is None or email == "":
        return
    if not isinstance(email, str):
        raise SteadfastError.validation(
            "recipient_email must be a string if provided", field="recipient_email"
        )
    if not _EMAIL_RE.match(email):
        raise SteadfastError.validation(f"Invalid email format: {email}", field="recipient_email")


def validate_order(order: CreateOrderRequest) -> None:
    """Aplica todos os validadores de um pedido, na ordem dos campos obrigatórios."""
    validate_invoice(order.invoice)
    validate_recipient_name(order.recipient_name)
    validate_recipient_address(order.recipient_address)
    validate_phone_number(order.recipient_phone, "recipient_phone")
    validate_cod_amount(order.cod_amount)

    if order.alternative_phone:
        validate_phone_number(order.alternative_phone, "alternative_phone")

    if order.recipient_email:
        validate_email(order.recipient_email)
