from abc import ABC, abstractmethod
from typing import Optional

from src.service.catalog.domain.entity.schedule_entity import Schedule
from src.service.seat_selection.domain.seat_occupancy import SeatOccupancy


class ISeatOccupancyQueryHandler(ABC):
    @abstractmethod
    async def get_occupancy(self, *, schedule: Schedule) -> Optional[SeatOccupancy]:
        """
        Per-seat state for the schedule.

        Returns None when the backend has not supplied per-seat data; the
        seat map then falls back to its deterministic placeholder.
        """
        pass
