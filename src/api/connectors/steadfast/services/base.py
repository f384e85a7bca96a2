"""Base dos serviços por endpoint da API Steadfast."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ErrorKind, SteadfastError

if TYPE_CHECKING:
    from ..http_client import SteadfastHttpClient

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class BaseService:
    """Serviço com acesso ao cliente HTTP compartilhado."""

    def __init__(self, http_client: SteadfastHttpClient) -> None:
        self._http = http_client

    @staticmethod
    def _validate(schema: type[M] | TypeAdapter[T], data: Any) -> M | T:
        """Converte o corpo 2xx no modelo esperado.

        Raises:
            SteadfastError: kind API quando o corpo não casa com o modelo
        """
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(data)
            return schema.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "steadfast_response_invalid",
                extra={"error_count": exc.error_count()},
            )
            raise SteadfastError(
                f"Unexpected response shape: {exc.error_count()} validation error(s)",
                ErrorKind.API,
                response=data,
            ) from exc


def require_positive_int(value: object, name: str) -> int:
    """Garante inteiro positivo para IDs usados em paths."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise SteadfastError.validation(f"{name} must be a positive integer", field=name)
    return value


def require_non_empty_str(value: object, name: str) -> str:
    if not value or not isinstance(value, str):
        raise SteadfastError.validation(f"{name} must be a non-empty string", field=name)
    return value
