from typing import Any, List

from src.platform.exception.exceptions import ApiError
from src.platform.http.api_client import ApiClient
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_gateway import IReservationGateway
from src.service.reservation.domain.reservation_entity import Reservation


def _to_reservation(data: Any, action: str) -> Reservation:
    if not isinstance(data, dict):
        raise ApiError(f'{action} reservation returned no reservation')
    return Reservation.from_dict(data)


class ReservationGatewayImpl(IReservationGateway):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def create(self, *, user_id: str, schedule_id: str, seat_number: int) -> Reservation:
        data = await self.api_client.post(
            '/reservations/public',
            body={'user_id': user_id, 'schedule_id': schedule_id, 'seat_number': seat_number},
        )
        return _to_reservation(data, 'Create')

    @Logger.io(truncate_content=True)
    async def list_for_user(self, *, user_id: str) -> List[Reservation]:
        data = await self.api_client.get(f'/reservations/public/user/{user_id}')
        if not isinstance(data, list):
            raise ApiError('Reservation list response is not a list')
        return [Reservation.from_dict(item) for item in data]

    @Logger.io
    async def cancel(self, *, reservation_id: str) -> Reservation:
        data = await self.api_client.delete(f'/reservations/public/{reservation_id}')
        return _to_reservation(data, 'Cancel')

    @Logger.io
    async def get_by_id(self, *, reservation_id: str) -> Reservation:
        data = await self.api_client.get(f'/reservations/{reservation_id}')
        return _to_reservation(data, 'Get')
