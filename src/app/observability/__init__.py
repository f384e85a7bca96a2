"""Observabilidade: correlation_id propagado para os logs."""

from app.observability.correlation import (
    bind_correlation_id,
    generate_correlation_id,
    get_correlation_id,
)

__all__ = [
    "bind_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
]
