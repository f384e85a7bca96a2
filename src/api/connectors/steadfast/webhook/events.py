"""Canal de eventos pub/sub do webhook.

Registro explícito `evento → listeners` em ordem de inscrição.
`emit` chama os listeners de forma síncrona, na ordem registrada.
Exceções de listeners propagam para quem emitiu.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventChannel:
    """Registro de listeners por nome de evento."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def subscribe(self, event: str, listener: Listener) -> Listener:
        """Inscreve listener no evento.

        O mesmo listener pode ser inscrito mais de uma vez e será
        chamado uma vez por inscrição.

        Returns:
            O próprio listener, para uso posterior em unsubscribe
        """
        self._listeners.setdefault(str(event), []).append(listener)
        return listener

    def unsubscribe(self, event: str, listener: Listener) -> bool:
        """Remove a primeira inscrição do listener. Retorna True se removeu."""
        listeners = self._listeners.get(str(event))
        if not listeners:
            return False
        try:
            listeners.remove(listener)
        except ValueError:
            return False
        if not listeners:
            del self._listeners[str(event)]
        return True

    def emit(self, event: str, *args: Any) -> int:
        """Chama os listeners do evento e retorna quantos foram chamados."""
        # Snapshot: listeners podem se desinscrever durante a emissão
        listeners = tuple(self._listeners.get(str(event), ()))
        for listener in listeners:
            listener(*args)
        if listeners:
            logger.debug(
                "webhook_event_emitted",
                extra={"event": str(event), "listener_count": len(listeners)},
            )
        return len(listeners)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(str(event), ()))

    def clear(self, event: str | None = None) -> None:
        """Remove listeners de um evento ou de todos."""
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(str(event), None)
