from typing import Any, List, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_route_gateway import IRouteGateway
from src.service.catalog.driven_adapter.gateway.rest_catalog_gateway import RestCatalogGateway
from src.service.catalog.domain.entity.route_entity import Route


class RouteGatewayImpl(RestCatalogGateway[Route], IRouteGateway):
    resource_name = 'routes'
    list_path = '/routes/'
    create_path = '/routes/'
    item_path = '/routes/{id}'

    def to_entity(self, data: Mapping[str, Any]) -> Route:
        return Route.from_dict(data)

    @Logger.io
    async def search(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
        min_seats: Optional[int] = None,
    ) -> List[Route]:
        data = await self.api_client.get(
            '/routes/search',
            params={
                'origin': origin,
                'destination': destination,
                'date': date,
                'min_seats': min_seats,
            },
        )
        return self._to_entities(data)
