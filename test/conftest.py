"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- Entity factories shared by every context (users, routes, schedules, reservations)
- An ApiClient factory backed by httpx.MockTransport (no real backend)

Architecture:
- Unit tests (test/**/unit/): pure, ports replaced with AsyncMock or in-memory fakes
- Platform tests (test/platform/): transport and error mapping against MockTransport
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('API_BASE_URL', 'http://testserver/api')
    os.environ.setdefault('API_TIMEOUT_SECONDS', '2')
    os.environ.setdefault('SESSION_FILE', str(test_log_dir / 'session.json'))
    os.environ.setdefault('LOG_TO_FILE', 'false')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from src.platform.http.api_client import ApiClient  # noqa: E402
from src.service.catalog.domain.entity.route_entity import Route  # noqa: E402
from src.service.catalog.domain.entity.schedule_entity import Schedule  # noqa: E402
from src.service.reservation.domain.reservation_entity import (  # noqa: E402
    Reservation,
    ReservationStatus,
)
from src.service.shared_kernel.domain.entity.user_entity import User, UserRole  # noqa: E402


TEST_BASE_URL = 'http://testserver/api'


# =============================================================================
# Users
# =============================================================================
@pytest.fixture
def traveller() -> User:
    return User(id='7', email='traveller@bus.com', name='Traveller', role=UserRole.USER)


@pytest.fixture
def admin_user() -> User:
    return User(id='1', email='admin@bus.com', name='Admin', role=UserRole.ADMIN)


# =============================================================================
# Entity factories
# =============================================================================
@pytest.fixture
def make_route() -> Callable[..., Route]:
    def _make(route_id: str, origin: str, destination: str, **overrides: Any) -> Route:
        fields: dict[str, Any] = {
            'id': route_id,
            'company_id': '1',
            'origin': origin,
            'destination': destination,
            'price': 80.0,
            'duration': '10h',
        }
        fields.update(overrides)
        return Route(**fields)

    return _make


@pytest.fixture
def make_schedule() -> Callable[..., Schedule]:
    def _make(schedule_id: str, route_id: str, date: str = '2025-01-15', **overrides: Any) -> Schedule:
        fields: dict[str, Any] = {
            'id': schedule_id,
            'route_id': route_id,
            'bus_id': '1',
            'departure_time': '20:00',
            'arrival_time': '06:00',
            'date': date,
            'available_seats': 40,
            'total_capacity': 40,
        }
        fields.update(overrides)
        return Schedule(**fields)

    return _make


@pytest.fixture
def make_reservation() -> Callable[..., Reservation]:
    def _make(reservation_id: str, **overrides: Any) -> Reservation:
        fields: dict[str, Any] = {
            'id': reservation_id,
            'user_id': '7',
            'schedule_id': '10',
            'seat_number': 12,
            'price': 80.0,
            'status': ReservationStatus.ACTIVE,
            'reservation_code': f'RES-{reservation_id:0>6}',
        }
        fields.update(overrides)
        return Reservation(**fields)

    return _make


# =============================================================================
# HTTP
# =============================================================================
Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
async def api_client_factory() -> AsyncGenerator[Callable[..., ApiClient], None]:
    """Build ApiClients whose requests are answered by ``handler``; closed at teardown"""
    clients: list[ApiClient] = []

    def _make(handler: Handler, *, token: str | None = None) -> ApiClient:
        client = ApiClient(
            base_url=TEST_BASE_URL,
            timeout=2.0,
            token_provider=lambda: token,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
