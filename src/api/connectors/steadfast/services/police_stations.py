"""Lista de delegacias (dados de referência)."""

from __future__ import annotations

from pydantic import TypeAdapter

from ..models import PoliceStation
from .base import BaseService

_STATION_LIST = TypeAdapter(list[PoliceStation])


class PoliceStationService(BaseService):
    async def get_police_stations(self) -> list[PoliceStation]:
        data = await self._http.get("/police_stations")
        return self._validate(_STATION_LIST, data)
