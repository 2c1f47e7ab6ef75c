"""
Unit tests for RouteSearchController

Test Focus:
1. Load once, filter locally on every query change (no further requests)
2. Invalid search terms keep the previous query
3. Remote search validates its form and keeps results apart from the cache
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exception_handlers import USER_MESSAGES
from src.platform.exception.exceptions import NetworkError
from src.service.catalog.app.query.search_routes_use_case import SearchRoutesUseCase
from src.service.catalog.driving_adapter.route_search_controller import RouteSearchController


@pytest.mark.unit
class TestRouteSearchController:
    @pytest.fixture
    def route_gateway(self, make_route) -> AsyncMock:
        gateway = AsyncMock()
        gateway.list_all = AsyncMock(
            return_value=[
                make_route('1', 'Lima', 'Cusco'),
                make_route('2', 'Lima', 'Arequipa'),
            ]
        )
        gateway.search = AsyncMock(return_value=[make_route('1', 'Lima', 'Cusco')])
        return gateway

    @pytest.fixture
    def schedule_gateway(self, make_schedule) -> AsyncMock:
        gateway = AsyncMock()
        gateway.list_all = AsyncMock(
            return_value=[
                make_schedule('10', '1', date='2025-01-15'),
                make_schedule('11', '2', date='2025-01-16'),
            ]
        )
        return gateway

    @pytest.fixture
    def controller(
        self, route_gateway: AsyncMock, schedule_gateway: AsyncMock
    ) -> RouteSearchController:
        return RouteSearchController(
            search_routes_use_case=SearchRoutesUseCase(
                route_gateway=route_gateway, schedule_gateway=schedule_gateway
            )
        )

    @pytest.mark.asyncio
    async def test_query_changes_filter_locally(
        self,
        controller: RouteSearchController,
        route_gateway: AsyncMock,
        schedule_gateway: AsyncMock,
    ) -> None:
        """
        Given: Routes and schedules loaded once
        When: Search terms change several times
        Then: Results follow the terms, no further requests
        """
        # Arrange
        assert await controller.load() is True

        # Act & Assert
        assert [r.route.id for r in controller.results] == ['1', '2']

        controller.update_query(origin='lima', destination='cus')
        assert [r.route.id for r in controller.results] == ['1']

        controller.update_query(date='2025-01-16')
        results = controller.results
        assert [r.route.id for r in results] == ['2']
        assert [s.id for s in results[0].schedules] == ['11']

        route_gateway.list_all.assert_awaited_once()
        schedule_gateway.list_all.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_date_keeps_previous_query(
        self, controller: RouteSearchController
    ) -> None:
        await controller.load()
        controller.update_query(origin='Lima')

        accepted = controller.update_query(origin='Lima', date='16-01-2025')

        assert accepted is False
        assert controller.error_message is not None
        assert 'YYYY-MM-DD' in controller.error_message
        assert controller.query.origin == 'Lima'
        assert controller.query.date is None

    @pytest.mark.asyncio
    async def test_load_failure_keeps_cached_lists(
        self, controller: RouteSearchController, route_gateway: AsyncMock
    ) -> None:
        # Arrange
        await controller.load()
        route_gateway.list_all = AsyncMock(side_effect=NetworkError('GET /routes/ failed'))

        # Act
        result = await controller.load()

        # Assert
        assert result is False
        assert len(controller.routes) == 2
        assert controller.error_message == USER_MESSAGES[NetworkError]

    @pytest.mark.asyncio
    async def test_remote_search(
        self, controller: RouteSearchController, route_gateway: AsyncMock
    ) -> None:
        result = await controller.search_remote(origin=' Lima ', destination='', min_seats=2)

        assert [r.id for r in result] == ['1']
        assert controller.remote_results == result
        route_gateway.search.assert_awaited_once_with(
            origin='Lima', destination=None, date=None, min_seats=2
        )

    @pytest.mark.asyncio
    async def test_remote_search_rejects_bad_min_seats(
        self, controller: RouteSearchController, route_gateway: AsyncMock
    ) -> None:
        result = await controller.search_remote(origin='Lima', min_seats=0)

        assert result is None
        assert controller.error_message is not None
        assert controller.error_message.startswith('min_seats:')
        route_gateway.search.assert_not_awaited()
