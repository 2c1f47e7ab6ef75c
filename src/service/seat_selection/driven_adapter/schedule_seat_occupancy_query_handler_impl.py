from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.catalog.domain.entity.schedule_entity import Schedule
from src.service.seat_selection.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from src.service.seat_selection.domain.seat_occupancy import SeatOccupancy


class ScheduleSeatOccupancyQueryHandlerImpl(ISeatOccupancyQueryHandler):
    """Reads ``occupied_seats`` / ``reserved_seats`` served with the schedule"""

    @Logger.io
    async def get_occupancy(self, *, schedule: Schedule) -> Optional[SeatOccupancy]:
        occupancy = SeatOccupancy.from_schedule(schedule)
        if occupancy is None:
            Logger.base.info(
                f'[SEAT] Schedule {schedule.id} has no per-seat data, using placeholder map'
            )
        return occupancy
