"""Fachada do cliente Steadfast: agrupa os serviços sobre um único transporte.

Uso:
    async with SteadfastClient(api_key="...", secret_key="...") as client:
        balance = await client.balance.get_balance()
        order = await client.orders.create_order(CreateOrderRequest(...))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .errors import ErrorKind, SteadfastError
from .http_client import HttpClientConfig, SteadfastHttpClient
from .services import (
    BalanceService,
    OrderService,
    PaymentService,
    PoliceStationService,
    ReturnService,
    StatusService,
)

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from config.settings import SteadfastSettings

logger = logging.getLogger(__name__)


class SteadfastClient:
    """Cliente da API Steadfast.

    Args:
        api_key: Chave de API (header Api-Key)
        secret_key: Chave secreta (header Secret-Key)
        base_url: URL base (padrão: portal Packzy v1)
        timeout_seconds: Timeout por chamada (padrão: 30s)
        http_client: httpx.AsyncClient reaproveitado entre chamadas (opcional)

    Raises:
        SteadfastError: kind CONFIGURATION se alguma chave estiver vazia
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not secret_key:
            raise SteadfastError("api_key and secret_key are required", ErrorKind.CONFIGURATION)

        config = HttpClientConfig(
            api_key=api_key,
            secret_key=secret_key,
            base_url=(base_url or BASE_URL).rstrip("/"),
            timeout_seconds=timeout_seconds or DEFAULT_TIMEOUT_SECONDS,
        )
        self._http = SteadfastHttpClient(config, client=http_client)

        self.orders = OrderService(self._http)
        self.status = StatusService(self._http)
        self.balance = BalanceService(self._http)
        self.returns = ReturnService(self._http)
        self.payments = PaymentService(self._http)
        self.police_stations = PoliceStationService(self._http)

        logger.debug(
            "steadfast_client_created",
            extra={"base_url": config.base_url, "timeout": config.timeout_seconds},
        )

    @classmethod
    def from_settings(
        cls,
        settings: SteadfastSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> SteadfastClient:
        return cls(
            settings.api_key,
            settings.secret_key,
            base_url=settings.base_url,
            timeout_seconds=settings.request_timeout_seconds,
            http_client=http_client,
        )

    @property
    def http(self) -> SteadfastHttpClient:
        return self._http

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> SteadfastClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
