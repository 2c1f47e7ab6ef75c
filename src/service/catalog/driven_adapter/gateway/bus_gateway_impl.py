from typing import Any, List, Mapping

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_bus_gateway import IBusGateway
from src.service.catalog.driven_adapter.gateway.rest_catalog_gateway import RestCatalogGateway
from src.service.catalog.domain.entity.bus_entity import Bus


class BusGatewayImpl(RestCatalogGateway[Bus], IBusGateway):
    resource_name = 'buses'
    list_path = '/buses/public'
    create_path = '/buses/public'
    item_path = '/buses/public/{id}'

    def to_entity(self, data: Mapping[str, Any]) -> Bus:
        return Bus.from_dict(data)

    @Logger.io
    async def list_by_company(self, *, company_id: str) -> List[Bus]:
        data = await self.api_client.get(self.list_path, params={'company_id': company_id})
        return self._to_entities(data)
