"""Settings do conector Steadfast.

Credenciais da API (Api-Key / Secret-Key) e do webhook (token Bearer).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from api.connectors.steadfast.constants import BASE_URL

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class SteadfastSettings:
    """Configurações do Steadfast.

    Attributes:
        api_key: Chave de API (header Api-Key)
        secret_key: Chave secreta (header Secret-Key)
        base_url: URL base da API
        request_timeout_seconds: Timeout por requisição HTTP
        webhook_token: Token Bearer esperado no webhook (vazio = usa api_key)
        webhook_skip_auth: Desliga a autenticação do webhook (apenas dev/test)
    """

    api_key: str = ""
    secret_key: str = ""
    base_url: str = BASE_URL
    request_timeout_seconds: float = 30.0
    webhook_token: str = ""
    webhook_skip_auth: bool = False

    @property
    def webhook_credential(self) -> str:
        """Credencial comparada com o Bearer recebido."""
        return self.webhook_token or self.api_key

    @property
    def secrets(self) -> tuple[str, ...]:
        """Valores que nunca devem aparecer em logs."""
        return tuple(s for s in (self.api_key, self.secret_key, self.webhook_token) if s)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Steadfast.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("STEADFAST_API_KEY não configurado")

        if not self.secret_key:
            errors.append("STEADFAST_SECRET_KEY não configurado")

        if not self.base_url.startswith(("https://", "http://")):
            errors.append("STEADFAST_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("STEADFAST_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.webhook_skip_auth and not self.webhook_credential:
            errors.append(
                "STEADFAST_WEBHOOK_TOKEN ou STEADFAST_API_KEY obrigatório "
                "com autenticação de webhook ativa"
            )

        return errors


def _load_from_env() -> SteadfastSettings:
    """Carrega SteadfastSettings a partir de variáveis de ambiente."""
    return SteadfastSettings(
        api_key=os.getenv("STEADFAST_API_KEY", ""),
        secret_key=os.getenv("STEADFAST_SECRET_KEY", ""),
        base_url=os.getenv("STEADFAST_BASE_URL", BASE_URL),
        request_timeout_seconds=float(
            os.getenv("STEADFAST_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        webhook_token=os.getenv("STEADFAST_WEBHOOK_TOKEN", ""),
        webhook_skip_auth=os.getenv("STEADFAST_WEBHOOK_SKIP_AUTH", "").lower()
        in _TRUE_VALUES,
    )


@lru_cache(maxsize=1)
def get_steadfast_settings() -> SteadfastSettings:
    """Retorna instância cacheada de SteadfastSettings."""
    return _load_from_env()
