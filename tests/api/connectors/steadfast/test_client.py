"""Testes da fachada SteadfastClient."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.steadfast import SteadfastClient
from api.connectors.steadfast.errors import ErrorKind, SteadfastError
from api.connectors.steadfast.services import (
    BalanceService,
    OrderService,
    PaymentService,
    PoliceStationService,
    ReturnService,
    StatusService,
)
from config.settings import SteadfastSettings


@pytest.mark.parametrize(("api_key", "secret_key"), [("", "s"), ("k", ""), ("", "")])
def test_requires_both_keys(api_key: str, secret_key: str) -> None:
    with pytest.raises(SteadfastError) as exc_info:
        SteadfastClient(api_key, secret_key)
    assert exc_info.value.kind is ErrorKind.CONFIGURATION


def test_exposes_services_sharing_one_transport() -> None:
    client = SteadfastClient("k", "s")

    assert isinstance(client.orders, OrderService)
    assert isinstance(client.status, StatusService)
    assert isinstance(client.balance, BalanceService)
    assert isinstance(client.returns, ReturnService)
    assert isinstance(client.payments, PaymentService)
    assert isinstance(client.police_stations, PoliceStationService)
    assert client.orders._http is client.http
    assert client.police_stations._http is client.http


def test_base_url_and_timeout_overrides() -> None:
    client = SteadfastClient("k", "s", base_url="https://sandbox.test/api/v1/", timeout_seconds=3)
    assert client.http.base_url == "https://sandbox.test/api/v1"
    assert client.http.timeout_seconds == 3


def test_from_settings() -> None:
    settings = SteadfastSettings(
        api_key="k",
        secret_key="s",
        base_url="https://sandbox.test/api/v1",
        request_timeout_seconds=12,
    )
    client = SteadfastClient.from_settings(settings)
    assert client.http.base_url == "https://sandbox.test/api/v1"
    assert client.http.timeout_seconds == 12


@pytest.mark.asyncio
async def test_context_manager_closes_injected_client(respx_mock) -> None:
    respx_mock.get("https://sandbox.test/api/v1/get_balance").mock(
        return_value=httpx.Response(200, json={"status": 200, "current_balance": 0})
    )
    async_client = httpx.AsyncClient()

    async with SteadfastClient(
        "k", "s", base_url="https://sandbox.test/api/v1", http_client=async_client
    ) as client:
        balance = await client.balance.get_balance()

    assert balance.current_balance == 0
    assert async_client.is_closed
