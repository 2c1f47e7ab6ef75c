from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_schedule_gateway import IScheduleGateway
from src.service.seat_selection.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from src.service.seat_selection.domain.seat_map import SeatMap


class GetSeatMapUseCase:
    def __init__(
        self,
        *,
        schedule_gateway: IScheduleGateway,
        seat_occupancy_query_handler: ISeatOccupancyQueryHandler,
    ) -> None:
        self.schedule_gateway = schedule_gateway
        self.seat_occupancy_query_handler = seat_occupancy_query_handler

    @Logger.io
    async def execute(self, *, schedule_id: str) -> SeatMap:
        schedule = await self.schedule_gateway.get_by_id(schedule_id=schedule_id)

        # Gate on the counts before any seat is shown
        if not schedule.has_seats_left:
            raise DomainError('No seats available for this schedule')

        occupancy = await self.seat_occupancy_query_handler.get_occupancy(schedule=schedule)
        return SeatMap.for_schedule(
            schedule_id=schedule.id,
            total_capacity=schedule.total_capacity,
            occupancy=occupancy,
        )
