"""Erro único do conector Steadfast, discriminado por `ErrorKind`.

Um só tipo de exceção com o tipo de falha explícito, em vez de uma
hierarquia de classes. Os testes e consumidores comparam `exc.kind`.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categoria da falha."""

    API = "api_error"
    TIMEOUT = "timeout_error"
    NETWORK = "network_error"
    VALIDATION = "validation_error"
    AUTHENTICATION_FORMAT = "authentication_format_error"
    AUTHENTICATION = "authentication_error"
    CONFIGURATION = "configuration_error"


class SteadfastError(Exception):
    """Erro do conector Steadfast sem dados sensíveis.

    Args:
        message: Mensagem legível (pode ser devolvida ao integrador)
        kind: Categoria da falha
        status_code: Status HTTP associado (0 para falha de rede)
        field: Campo inválido, quando a falha é de validação
        response: Corpo decodificado da resposta da API, se houver
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.API,
        *,
        status_code: int | None = None,
        field: str | None = None,
        response: object | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.field = field
        self.response = response

    def __repr__(self) -> str:
        return f"SteadfastError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def validation(cls, message: str, field: str | None = None) -> SteadfastError:
        """Atalho para erros de validação de entrada."""
        return cls(message, ErrorKind.VALIDATION, status_code=400, field=field)
