from typing import List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_bus_gateway import IBusGateway
from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway
from src.service.catalog.app.interface.i_route_gateway import IRouteGateway
from src.service.catalog.app.interface.i_schedule_gateway import IScheduleGateway
from src.service.catalog.app.interface.i_user_gateway import IUserGateway
from src.service.catalog.domain.entity.company_entity import Company
from src.service.catalog.domain.entity.schedule_entity import Schedule


@attrs.define(frozen=True)
class AdminDashboardStats:
    companies: int
    buses: int
    routes: int
    schedules: int
    users: int
    booked_seats: int


def booked_seats(schedules: List[Schedule]) -> int:
    """
    Seats taken across all schedules, from the backend's own counts.

    There is no endpoint listing every reservation, so this stands in for the
    reservation total: each active reservation holds exactly one seat.
    """
    return sum(max(s.total_capacity - s.available_seats, 0) for s in schedules)


class GetAdminDashboardUseCase:
    def __init__(
        self,
        *,
        company_gateway: ICatalogGateway[Company],
        bus_gateway: IBusGateway,
        route_gateway: IRouteGateway,
        schedule_gateway: IScheduleGateway,
        user_gateway: IUserGateway,
    ) -> None:
        self.company_gateway = company_gateway
        self.bus_gateway = bus_gateway
        self.route_gateway = route_gateway
        self.schedule_gateway = schedule_gateway
        self.user_gateway = user_gateway

    @Logger.io
    async def execute(self) -> AdminDashboardStats:
        companies = await self.company_gateway.list_all()
        buses = await self.bus_gateway.list_all()
        routes = await self.route_gateway.list_all()
        schedules = await self.schedule_gateway.list_all()
        users = await self.user_gateway.list_all()
        return AdminDashboardStats(
            companies=len(companies),
            buses=len(buses),
            routes=len(routes),
            schedules=len(schedules),
            users=len(users),
            booked_seats=booked_seats(schedules),
        )
