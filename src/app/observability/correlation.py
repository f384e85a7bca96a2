"""Correlation id por requisição.

Usa ContextVar para ser seguro entre tasks asyncio. O valor é lido pelo
CorrelationIdFilter e aparece em todo log emitido durante a requisição.

Uso:
    with bind_correlation_id(request.headers.get("x-correlation-id")):
        await handler.handle(body, auth_header)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


@contextmanager
def bind_correlation_id(value: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair.

    Args:
        value: ID recebido (ex: header x-correlation-id). Se vazio, gera UUID4.

    Yields:
        O correlation_id efetivo.
    """
    correlation_id = value or generate_correlation_id()
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)
