from typing import Any, ClassVar, Dict, List, Mapping, Optional, TypeVar

from src.platform.exception.exceptions import ApiError, DomainError
from src.platform.http.api_client import ApiClient
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway


_E = TypeVar('_E')


class RestCatalogGateway(ICatalogGateway[_E]):
    """
    CRUD against one REST collection.

    Subclasses declare the paths; the backend is not uniform (companies are
    listed under ``/companies/public`` but written under ``/companies/{id}``).
    """

    resource_name: ClassVar[str]
    list_path: ClassVar[str]
    create_path: ClassVar[Optional[str]]
    item_path: ClassVar[str]  # formatted with ``id``

    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    def to_entity(self, data: Mapping[str, Any]) -> _E:
        raise NotImplementedError

    def _to_entities(self, data: Any) -> List[_E]:
        if not isinstance(data, list):
            raise ApiError(f'Expected a list of {self.resource_name}, got {type(data).__name__}')
        return [self.to_entity(item) for item in data]

    def _require_item(self, data: Any, action: str) -> _E:
        if not isinstance(data, dict):
            raise ApiError(f'{action} {self.resource_name} returned no item')
        return self.to_entity(data)

    @Logger.io(truncate_content=True)
    async def list_all(self) -> List[_E]:
        return self._to_entities(await self.api_client.get(self.list_path))

    @Logger.io
    async def create(self, *, payload: Dict[str, Any]) -> _E:
        if self.create_path is None:
            raise DomainError(f'Creating {self.resource_name} is not supported')
        data = await self.api_client.post(self.create_path, body=payload)
        return self._require_item(data, 'Create')

    @Logger.io
    async def update(self, *, entity_id: str, payload: Dict[str, Any]) -> _E:
        data = await self.api_client.put(self.item_path.format(id=entity_id), body=payload)
        return self._require_item(data, 'Update')

    @Logger.io
    async def delete(self, *, entity_id: str) -> None:
        await self.api_client.delete(self.item_path.format(id=entity_id))
