from abc import abstractmethod
from typing import List, Optional

from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway
from src.service.catalog.domain.entity.route_entity import Route


class IRouteGateway(ICatalogGateway[Route]):
    @abstractmethod
    async def search(
        self,
        *,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        date: Optional[str] = None,
        min_seats: Optional[int] = None,
    ) -> List[Route]:
        """Server-side search: GET /routes/search"""
        pass
