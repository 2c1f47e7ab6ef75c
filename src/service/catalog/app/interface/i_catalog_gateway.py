from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, TypeVar


_E = TypeVar('_E')


class ICatalogGateway(ABC, Generic[_E]):
    """CRUD over one backend resource collection"""

    @abstractmethod
    async def list_all(self) -> List[_E]:
        pass

    @abstractmethod
    async def create(self, *, payload: Dict[str, Any]) -> _E:
        pass

    @abstractmethod
    async def update(self, *, entity_id: str, payload: Dict[str, Any]) -> _E:
        pass

    @abstractmethod
    async def delete(self, *, entity_id: str) -> None:
        pass
