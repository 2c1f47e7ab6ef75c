from abc import abstractmethod
from typing import List

from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway
from src.service.catalog.domain.entity.bus_entity import Bus


class IBusGateway(ICatalogGateway[Bus]):
    @abstractmethod
    async def list_by_company(self, *, company_id: str) -> List[Bus]:
        pass
