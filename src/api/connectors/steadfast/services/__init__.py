"""Serviços por endpoint da API Steadfast."""

from .balance import BalanceService
from .base import BaseService
from .orders import OrderService
from .payments import PaymentService
from .police_stations import PoliceStationService
from .returns import ReturnService
from .status import StatusService

__all__ = [
    "BalanceService",
    "BaseService",
    "OrderService",
    "PaymentService",
    "PoliceStationService",
    "ReturnService",
    "StatusService",
]
