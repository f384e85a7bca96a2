"""Autenticação Bearer dos webhooks Steadfast.

O Steadfast envia `Authorization: Bearer <api_key>` em cada POST.
Extração (erro de formato, mensagem informativa) e verificação
(booleana, tempo constante) ficam separadas.
"""

from __future__ import annotations

import hmac

from ..errors import ErrorKind, SteadfastError

BEARER_PREFIX = "Bearer "


def extract_bearer_token(auth_header: str | None) -> str:
    """Extrai o token do header Authorization.

    Args:
        auth_header: Valor bruto do header (pode ser None)

    Raises:
        SteadfastError: kind AUTHENTICATION_FORMAT se o header estiver
            ausente, não usar o esquema Bearer ou trouxer token vazio

    Returns:
        Token sem espaços nas pontas
    """
    if not auth_header:
        raise SteadfastError(
            "Missing Authorization header",
            ErrorKind.AUTHENTICATION_FORMAT,
            status_code=401,
        )

    if not auth_header.startswith(BEARER_PREFIX):
        raise SteadfastError(
            "Authorization header must use Bearer scheme",
            ErrorKind.AUTHENTICATION_FORMAT,
            status_code=401,
        )

    token = auth_header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise SteadfastError(
            "Bearer token is empty",
            ErrorKind.AUTHENTICATION_FORMAT,
            status_code=401,
        )

    return token


def verify_bearer_token(received_token: str | None, expected_token: str | None) -> bool:
    """Compara tokens em tempo constante. Nunca levanta exceção.

    Tamanho não é segredo: tamanhos diferentes retornam False antes
    da comparação byte a byte.
    """
    if not received_token or not expected_token:
        return False

    if len(received_token) != len(expected_token):
        return False

    try:
        return hmac.compare_digest(
            received_token.encode("utf-8"),
            expected_token.encode("utf-8"),
        )
    except (TypeError, ValueError, UnicodeError):
        return False
