from abc import ABC, abstractmethod
from typing import List

from src.service.reservation.domain.reservation_entity import Reservation


class IReservationGateway(ABC):
    """Backend reservation endpoints; price, code and status are server-authoritative"""

    @abstractmethod
    async def create(self, *, user_id: str, schedule_id: str, seat_number: int) -> Reservation:
        pass

    @abstractmethod
    async def list_for_user(self, *, user_id: str) -> List[Reservation]:
        pass

    @abstractmethod
    async def cancel(self, *, reservation_id: str) -> Reservation:
        pass

    @abstractmethod
    async def get_by_id(self, *, reservation_id: str) -> Reservation:
        pass
