from typing import Any, Mapping

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_user_gateway import IUserGateway
from src.service.catalog.driven_adapter.gateway.rest_catalog_gateway import RestCatalogGateway
from src.service.shared_kernel.domain.entity.user_entity import User


class UserGatewayImpl(RestCatalogGateway[User], IUserGateway):
    resource_name = 'users'
    list_path = '/users/public'
    create_path = None  # Accounts only come from /auth/register
    item_path = '/users/{id}'

    def to_entity(self, data: Mapping[str, Any]) -> User:
        return User.from_dict(data)

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> User:
        data = await self.api_client.get(self.item_path.format(id=user_id))
        return self._require_item(data, 'Get')
