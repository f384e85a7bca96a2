"""Respostas do webhook: sempre exatamente sucesso ou erro.

Mapeamento HTTP fixo (contrato externo): sucesso → 200, erro → 400.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

DEFAULT_SUCCESS_MESSAGE = "Webhook received successfully."


@dataclass(frozen=True, slots=True)
class WebhookSuccessResponse:
    """Webhook aceito e processado."""

    message: str = DEFAULT_SUCCESS_MESSAGE
    status: Literal["success"] = field(default="success", init=False)

    @property
    def http_status(self) -> int:
        return 200

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status, "message": self.message}


@dataclass(frozen=True, slots=True)
class WebhookErrorResponse:
    """Webhook rejeitado (autenticação, validação ou falha do callback)."""

    message: str
    status: Literal["error"] = field(default="error", init=False)

    @property
    def http_status(self) -> int:
        return 400

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status, "message": self.message}


WebhookResponse = WebhookSuccessResponse | WebhookErrorResponse


def create_success_response(message: str = DEFAULT_SUCCESS_MESSAGE) -> WebhookSuccessResponse:
    return WebhookSuccessResponse(message=message)


def create_error_response(message: str) -> WebhookErrorResponse:
    return WebhookErrorResponse(message=message)
