from typing import List, Optional

from src.platform.exception.exception_handlers import to_user_message
from src.platform.exception.exceptions import ValidationError
from src.platform.screen.base_screen_controller import BaseScreenController, parse_form
from src.service.catalog.app.query.search_routes_use_case import (
    RouteSearchResult,
    SearchRoutesUseCase,
)
from src.service.catalog.domain.entity.route_entity import Route
from src.service.catalog.domain.entity.schedule_entity import Schedule
from src.service.catalog.driving_adapter.schema.catalog_schema import RouteSearchQuery


class RouteSearchController(BaseScreenController):
    """
    Route search screen.

    ``load`` fetches routes and schedules once; editing the form only
    re-filters the cached lists. ``search_remote`` asks the backend instead
    (supports ``min_seats``) and keeps its answer apart from the cache.
    """

    def __init__(self, *, search_routes_use_case: SearchRoutesUseCase) -> None:
        super().__init__()
        self.search_routes_use_case = search_routes_use_case
        self.routes: List[Route] = []
        self.schedules: List[Schedule] = []
        self.query = RouteSearchQuery()
        self.remote_results: List[Route] = []

    async def load(self) -> bool:
        async def operation() -> bool:
            routes, schedules = await self.search_routes_use_case.load_catalog()
            self.routes, self.schedules = routes, schedules
            return True

        return bool(await self.run_action('load', operation))

    def update_query(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
    ) -> bool:
        """Store new search terms; an invalid form keeps the previous query."""
        try:
            self.query = parse_form(
                RouteSearchQuery, {'origin': origin, 'destination': destination, 'date': date}
            )
        except ValidationError as e:
            self.error_message = to_user_message(e)
            return False
        self.error_message = None
        return True

    @property
    def results(self) -> List[RouteSearchResult]:
        return self.search_routes_use_case.filter_local(
            self.routes,
            self.schedules,
            origin=self.query.origin,
            destination=self.query.destination,
            date=self.query.date,
        )

    async def search_remote(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
        min_seats: Optional[int] = None,
    ) -> Optional[List[Route]]:
        async def operation() -> List[Route]:
            query = parse_form(
                RouteSearchQuery,
                {
                    'origin': origin,
                    'destination': destination,
                    'date': date,
                    'min_seats': min_seats,
                },
            )
            self.remote_results = await self.search_routes_use_case.search_remote(
                origin=query.origin,
                destination=query.destination,
                date=query.date,
                min_seats=query.min_seats,
            )
            return self.remote_results

        return await self.run_action('search', operation)
