"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.http.api_client import ApiClient
from src.service.auth.app.command.login_use_case import LoginUseCase
from src.service.auth.app.command.logout_use_case import LogoutUseCase
from src.service.auth.app.command.register_use_case import RegisterUseCase
from src.service.auth.app.session import Session
from src.service.auth.driven_adapter.auth_gateway_impl import AuthGatewayImpl
from src.service.auth.driven_adapter.file_session_store_impl import FileSessionStoreImpl
from src.service.auth.driving_adapter.auth_controller import AuthController
from src.service.catalog.app.command.manage_catalog_use_case import ManageCatalogUseCase
from src.service.catalog.app.query.get_admin_dashboard_use_case import GetAdminDashboardUseCase
from src.service.catalog.app.query.search_routes_use_case import SearchRoutesUseCase
from src.service.catalog.driven_adapter.gateway.bus_gateway_impl import BusGatewayImpl
from src.service.catalog.driven_adapter.gateway.company_gateway_impl import CompanyGatewayImpl
from src.service.catalog.driven_adapter.gateway.route_gateway_impl import RouteGatewayImpl
from src.service.catalog.driven_adapter.gateway.schedule_gateway_impl import ScheduleGatewayImpl
from src.service.catalog.driven_adapter.gateway.user_gateway_impl import UserGatewayImpl
from src.service.catalog.driving_adapter.admin_dashboard_controller import AdminDashboardController
from src.service.catalog.driving_adapter.catalog_admin_controller import CatalogAdminController
from src.service.catalog.driving_adapter.route_search_controller import RouteSearchController
from src.service.catalog.driving_adapter.schema.catalog_schema import (
    BusForm,
    CompanyForm,
    RouteForm,
    ScheduleForm,
    UserUpdateForm,
)
from src.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.reservation.app.query.list_user_reservations_use_case import (
    ListUserReservationsUseCase,
)
from src.service.reservation.driven_adapter.reservation_gateway_impl import (
    ReservationGatewayImpl,
)
from src.service.reservation.driving_adapter.reservation_lifecycle_client import (
    ReservationLifecycleClient,
)
from src.service.seat_selection.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seat_selection.driven_adapter.schedule_seat_occupancy_query_handler_impl import (
    ScheduleSeatOccupancyQueryHandlerImpl,
)
from src.service.seat_selection.driving_adapter.seat_selection_controller import (
    SeatSelectionController,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Session (explicit object, restored by app_factory.startup)
    session_store = providers.Singleton(
        FileSessionStoreImpl, path=config_service.provided.SESSION_FILE
    )
    session = providers.Singleton(Session, session_store=session_store)

    # Transport: bearer token read from the session on every request
    api_client = providers.Singleton(
        ApiClient,
        base_url=config_service.provided.API_BASE_URL,
        timeout=config_service.provided.API_TIMEOUT_SECONDS,
        token_provider=session.provided.get_access_token,
    )

    # Gateways
    auth_gateway = providers.Singleton(AuthGatewayImpl, api_client=api_client)
    company_gateway = providers.Singleton(CompanyGatewayImpl, api_client=api_client)
    bus_gateway = providers.Singleton(BusGatewayImpl, api_client=api_client)
    route_gateway = providers.Singleton(RouteGatewayImpl, api_client=api_client)
    schedule_gateway = providers.Singleton(ScheduleGatewayImpl, api_client=api_client)
    user_gateway = providers.Singleton(UserGatewayImpl, api_client=api_client)
    reservation_gateway = providers.Singleton(ReservationGatewayImpl, api_client=api_client)
    seat_occupancy_query_handler = providers.Singleton(ScheduleSeatOccupancyQueryHandlerImpl)

    # Auth use cases
    login_use_case = providers.Factory(LoginUseCase, auth_gateway=auth_gateway, session=session)
    register_use_case = providers.Factory(
        RegisterUseCase, auth_gateway=auth_gateway, session=session
    )
    logout_use_case = providers.Factory(LogoutUseCase, session=session)

    # Catalog use cases
    search_routes_use_case = providers.Factory(
        SearchRoutesUseCase, route_gateway=route_gateway, schedule_gateway=schedule_gateway
    )
    manage_companies_use_case = providers.Factory(ManageCatalogUseCase, gateway=company_gateway)
    manage_buses_use_case = providers.Factory(ManageCatalogUseCase, gateway=bus_gateway)
    manage_routes_use_case = providers.Factory(ManageCatalogUseCase, gateway=route_gateway)
    manage_schedules_use_case = providers.Factory(ManageCatalogUseCase, gateway=schedule_gateway)
    manage_users_use_case = providers.Factory(ManageCatalogUseCase, gateway=user_gateway)
    get_admin_dashboard_use_case = providers.Factory(
        GetAdminDashboardUseCase,
        company_gateway=company_gateway,
        bus_gateway=bus_gateway,
        route_gateway=route_gateway,
        schedule_gateway=schedule_gateway,
        user_gateway=user_gateway,
    )

    # Seat selection
    get_seat_map_use_case = providers.Factory(
        GetSeatMapUseCase,
        schedule_gateway=schedule_gateway,
        seat_occupancy_query_handler=seat_occupancy_query_handler,
    )

    # Reservation use cases
    create_reservation_use_case = providers.Factory(
        CreateReservationUseCase, reservation_gateway=reservation_gateway
    )
    list_user_reservations_use_case = providers.Factory(
        ListUserReservationsUseCase, reservation_gateway=reservation_gateway
    )
    cancel_reservation_use_case = providers.Factory(
        CancelReservationUseCase, reservation_gateway=reservation_gateway
    )
    get_reservation_use_case = providers.Factory(
        GetReservationUseCase, reservation_gateway=reservation_gateway
    )

    # Screen controllers (one per screen instance)
    auth_controller = providers.Factory(
        AuthController,
        session=session,
        login_use_case=login_use_case,
        register_use_case=register_use_case,
        logout_use_case=logout_use_case,
    )
    route_search_controller = providers.Factory(
        RouteSearchController, search_routes_use_case=search_routes_use_case
    )
    seat_selection_controller = providers.Factory(
        SeatSelectionController,
        session=session,
        get_seat_map_use_case=get_seat_map_use_case,
        create_reservation_use_case=create_reservation_use_case,
    )
    reservation_lifecycle_client = providers.Factory(
        ReservationLifecycleClient,
        create_reservation_use_case=create_reservation_use_case,
        list_user_reservations_use_case=list_user_reservations_use_case,
        cancel_reservation_use_case=cancel_reservation_use_case,
        get_reservation_use_case=get_reservation_use_case,
    )
    company_admin_controller = providers.Factory(
        CatalogAdminController, manage_use_case=manage_companies_use_case, form_cls=CompanyForm
    )
    bus_admin_controller = providers.Factory(
        CatalogAdminController, manage_use_case=manage_buses_use_case, form_cls=BusForm
    )
    route_admin_controller = providers.Factory(
        CatalogAdminController, manage_use_case=manage_routes_use_case, form_cls=RouteForm
    )
    schedule_admin_controller = providers.Factory(
        CatalogAdminController, manage_use_case=manage_schedules_use_case, form_cls=ScheduleForm
    )
    user_admin_controller = providers.Factory(
        CatalogAdminController, manage_use_case=manage_users_use_case, form_cls=UserUpdateForm
    )
    admin_dashboard_controller = providers.Factory(
        AdminDashboardController, get_admin_dashboard_use_case=get_admin_dashboard_use_case
    )
