from typing import List, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_route_gateway import IRouteGateway
from src.service.catalog.app.interface.i_schedule_gateway import IScheduleGateway
from src.service.catalog.domain.entity.route_entity import Route
from src.service.catalog.domain.entity.schedule_entity import Schedule
from src.service.catalog.domain.route_filter import filter_routes, schedules_for_route


@attrs.define(frozen=True)
class RouteSearchResult:
    route: Route
    schedules: List[Schedule]


class SearchRoutesUseCase:
    def __init__(
        self, *, route_gateway: IRouteGateway, schedule_gateway: IScheduleGateway
    ) -> None:
        self.route_gateway = route_gateway
        self.schedule_gateway = schedule_gateway

    @Logger.io(truncate_content=True)
    async def load_catalog(self) -> tuple[List[Route], List[Schedule]]:
        routes = await self.route_gateway.list_all()
        schedules = await self.schedule_gateway.list_all()
        return routes, schedules

    @staticmethod
    def filter_local(
        routes: List[Route],
        schedules: List[Schedule],
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
    ) -> List[RouteSearchResult]:
        """Filter already-fetched data; no network."""
        return [
            RouteSearchResult(route=route, schedules=schedules_for_route(route, schedules, date=date))
            for route in filter_routes(
                routes, schedules, origin=origin, destination=destination, date=date
            )
        ]

    @Logger.io(truncate_content=True)
    async def search_remote(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
        min_seats: Optional[int] = None,
    ) -> List[Route]:
        return await self.route_gateway.search(
            origin=origin, destination=destination, date=date, min_seats=min_seats
        )
