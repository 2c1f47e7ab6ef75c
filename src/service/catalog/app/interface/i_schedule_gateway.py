from abc import abstractmethod

from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway
from src.service.catalog.domain.entity.schedule_entity import Schedule


class IScheduleGateway(ICatalogGateway[Schedule]):
    @abstractmethod
    async def get_by_id(self, *, schedule_id: str) -> Schedule:
        pass
