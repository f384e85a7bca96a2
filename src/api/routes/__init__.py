"""Rotas HTTP: health check e webhook do Steadfast.

- routes/health/: liveness
- routes/steadfast/: webhook de status de entrega
- router.py: agrega os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
