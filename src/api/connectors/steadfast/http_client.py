"""Cliente HTTP da API Steadfast.

Autenticação por headers estáticos (Api-Key, Secret-Key).
Classificação de falhas em SteadfastError:
- TIMEOUT: tempo excedido (status 408)
- NETWORK: falha de conexão/transporte ou JSON inválido (status 0)
- API: resposta não-2xx (status real + corpo decodificado)

Sem retry: cada chamada é uma única tentativa.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .constants import BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .errors import ErrorKind, SteadfastError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP Steadfast."""

    api_key: str
    secret_key: str
    base_url: str = BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: dict[str, str] = field(default_factory=dict)


class SteadfastHttpClient:
    """Wrapper REST sobre httpx.AsyncClient.

    Args:
        config: Credenciais, URL base e timeout
        client: AsyncClient externo (opcional). Sem ele, cada chamada
            abre e fecha seu próprio AsyncClient.
    """

    def __init__(
        self,
        config: HttpClientConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    def _build_headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {
            "Api-Key": self._config.api_key,
            "Secret-Key": self._config.secret_key,
            "Content-Type": "application/json",
            **self._config.default_headers,
            **(headers or {}),
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa requisição e retorna o corpo decodificado.

        Raises:
            SteadfastError: kind API, TIMEOUT ou NETWORK
        """
        url = f"{self._config.base_url}{path}"
        request_headers = self._build_headers(headers)

        try:
            if self._client is not None:
                response = await self._send(self._client, method, url, json_body, request_headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, method, url, json_body, request_headers)
        except httpx.TimeoutException as exc:
            logger.warning(
                "steadfast_request_timeout",
                extra={"method": method, "path": path, "timeout": self._config.timeout_seconds},
            )
            raise SteadfastError("Request timeout", ErrorKind.TIMEOUT, status_code=408) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "steadfast_request_failed",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise SteadfastError(
                f"Request failed: {exc}", ErrorKind.NETWORK, status_code=0
            ) from exc

        data = _decode_body(response)

        if not response.is_success:
            message = _error_message(data, response.status_code)
            logger.warning(
                "steadfast_api_error",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise SteadfastError(
                message,
                ErrorKind.API,
                status_code=response.status_code,
                response=data,
            )

        logger.debug(
            "steadfast_request_ok",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return data

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        json_body: Any | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            json=json_body,
            headers=headers,
            timeout=self._config.timeout_seconds,
        )

    async def get(self, path: str, headers: dict[str, str] | None = None) -> Any:
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, json_body=json_body, headers=headers)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()


def _decode_body(response: httpx.Response) -> Any:
    """Decodifica o corpo: JSON quando declarado, senão texto em `message`.

    Raises:
        SteadfastError: kind NETWORK (status 0) se o JSON declarado for inválido
    """
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning(
                "steadfast_response_decode_failed",
                extra={"status_code": response.status_code, "error_type": type(exc).__name__},
            )
            raise SteadfastError(
                f"Request failed: {exc}", ErrorKind.NETWORK, status_code=0
            ) from exc
    text = response.text
    return {"message": text} if text else {}


def _error_message(data: Any, status_code: int) -> str:
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return f"HTTP {status_code}"
