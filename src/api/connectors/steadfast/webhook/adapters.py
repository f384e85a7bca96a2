"""Adapter genérico entre frameworks HTTP e o SteadfastWebhookHandler.

Qualquer host que exponha `body` + `headers` no request e
`status(code)` + `json(data)` na resposta pode usar este adapter.
O adapter FastAPI fica em api/routes/steadfast/webhook.py.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .handler import SteadfastWebhookHandler
    from .responses import WebhookResponse


class WebhookRequest(Protocol):
    """Request mínimo: corpo decodificado e headers."""

    body: object
    headers: Mapping[str, str | Sequence[str] | None]


class WebhookReply(Protocol):
    """Resposta mínima: status HTTP e corpo JSON."""

    def status(self, code: int) -> Any: ...

    def json(self, data: Any) -> Any: ...


def get_authorization_header(
    headers: Mapping[str, str | Sequence[str] | None],
) -> str | None:
    """Retorna o header Authorization (case-insensitive, primeiro valor se lista)."""
    value: str | Sequence[str] | None = None
    for name, candidate in headers.items():
        if name.lower() == "authorization":
            value = candidate
            break

    if value is None or isinstance(value, str):
        return value
    return value[0] if len(value) > 0 else None


def render_http_response(result: WebhookResponse) -> tuple[int, dict[str, str]]:
    """Converte a resposta do handler em (status HTTP, corpo JSON)."""
    return result.http_status, result.to_dict()


def create_generic_webhook_handler(
    handler: SteadfastWebhookHandler,
) -> Callable[[WebhookRequest, WebhookReply], Awaitable[None]]:
    """Cria função `(request, reply)` para hosts genéricos.

    Exemplo:
        endpoint = create_generic_webhook_handler(handler)
        await endpoint(request, reply)
    """

    async def _endpoint(request: WebhookRequest, reply: WebhookReply) -> None:
        result = await handler.handle(request.body, get_authorization_header(request.headers))
        status_code, body = render_http_response(result)
        reply.status(status_code)
        reply.json(body)

    return _endpoint
