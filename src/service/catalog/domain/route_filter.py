"""
Route filter over already-fetched routes and schedules.

Three independent predicates ANDed together; an empty term matches
everything. Pure: no I/O, no hidden state.
"""

from typing import Iterable, List, Optional

from src.service.catalog.domain.entity.route_entity import Route
from src.service.catalog.domain.entity.schedule_entity import Schedule


def _contains(value: str, query: Optional[str]) -> bool:
    if not query:
        return True
    return query.lower() in value.lower()


def matches_origin(route: Route, query: Optional[str]) -> bool:
    return _contains(route.origin, query)


def matches_destination(route: Route, query: Optional[str]) -> bool:
    return _contains(route.destination, query)


def matches_date(route: Route, date: Optional[str], schedules: Iterable[Schedule]) -> bool:
    if not date:
        return True
    # Exact string equality, not calendar-aware
    return any(s.route_id == route.id and s.date == date for s in schedules)


def filter_routes(
    routes: Iterable[Route],
    schedules: Iterable[Schedule],
    *,
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    date: Optional[str] = None,
) -> List[Route]:
    schedules = list(schedules)
    return [
        route
        for route in routes
        if matches_origin(route, origin)
        and matches_destination(route, destination)
        and matches_date(route, date, schedules)
    ]


def schedules_for_route(
    route: Route, schedules: Iterable[Schedule], *, date: Optional[str] = None
) -> List[Schedule]:
    return [s for s in schedules if s.route_id == route.id and (not date or s.date == date)]
