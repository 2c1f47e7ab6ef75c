from typing import Any, Dict, Generic, List, TypeVar

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_catalog_gateway import ICatalogGateway


_E = TypeVar('_E')


class ManageCatalogUseCase(Generic[_E]):
    """
    Admin CRUD for one resource.

    Every write is followed by an authoritative refetch of the whole list;
    the caller replaces what it displays with the returned list instead of
    patching its local copy.
    """

    def __init__(self, *, gateway: ICatalogGateway[_E]) -> None:
        self.gateway = gateway

    @Logger.io(truncate_content=True)
    async def list_all(self) -> List[_E]:
        return await self.gateway.list_all()

    @Logger.io(truncate_content=True)
    async def create(self, *, payload: Dict[str, Any]) -> List[_E]:
        await self.gateway.create(payload=payload)
        return await self.gateway.list_all()

    @Logger.io(truncate_content=True)
    async def update(self, *, entity_id: str, payload: Dict[str, Any]) -> List[_E]:
        await self.gateway.update(entity_id=entity_id, payload=payload)
        return await self.gateway.list_all()

    @Logger.io(truncate_content=True)
    async def delete(self, *, entity_id: str) -> List[_E]:
        await self.gateway.delete(entity_id=entity_id)
        return await self.gateway.list_all()
