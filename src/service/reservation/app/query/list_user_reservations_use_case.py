from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.domain.reservation_entity import Reservation


class ListUserReservationsUseCase:
    def __init__(self, *, reservation_gateway: IReservationGateway) -> None:
        self.reservation_gateway = reservation_gateway

    @Logger.io(truncate_content=True)
    async def execute(self, *, user_id: str) -> List[Reservation]:
        return await self.reservation_gateway.list_for_user(user_id=user_id)
