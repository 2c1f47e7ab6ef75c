from abc import abstractmethod

from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway
from src.service.shared_kernel.domain.entity.user_entity import User


class IUserGateway(ICatalogGateway[User]):
    @abstractmethod
    async def get_by_id(self, *, user_id: str) -> User:
        pass
