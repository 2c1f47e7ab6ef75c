from typing import Any, Awaitable, Dict, Generic, List, Optional, Type, TypeVar

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.screen.base_screen_controller import BaseScreenController, parse_form
from src.service.catalog.app.command.manage_catalog_use_case import ManageCatalogUseCase
from src.service.catalog.driving_adapter.schema.catalog_schema import CatalogForm


_E = TypeVar('_E')


class CatalogAdminController(BaseScreenController, Generic[_E]):
    """
    One admin CRUD screen (companies, buses, routes, schedules, users).

    ``items`` is only ever replaced by a fresh list from the backend; a
    failed call leaves it as it was.

    Refresh and writes may overlap. Each list is stamped when it is
    requested (a refresh) or when it arrives (a write, whose list is fetched
    after the write lands), and a list older than the one on screen is
    dropped.
    """

    def __init__(
        self,
        *,
        manage_use_case: ManageCatalogUseCase[_E],
        form_cls: Type[CatalogForm],
    ) -> None:
        super().__init__()
        self.manage_use_case = manage_use_case
        self.form_cls = form_cls
        self.items: List[_E] = []
        self._issued_generation = 0
        self._shown_generation = 0

    def _next_generation(self) -> int:
        self._issued_generation += 1
        return self._issued_generation

    def _replace_items(self, items: List[_E], generation: int) -> bool:
        if generation < self._shown_generation:
            Logger.base.debug(
                f'[ADMIN] Dropping stale list (generation {generation} < {self._shown_generation})'
            )
            return True
        self.items = items
        self._shown_generation = generation
        return True

    async def _list_and_replace(self) -> bool:
        generation = self._next_generation()
        return self._replace_items(await self.manage_use_case.list_all(), generation)

    async def _write_then_replace(self, write: Awaitable[List[_E]]) -> bool:
        try:
            items = await write
        except NotFoundError:
            # Stale reference: show what the backend has now, then surface the error
            await self._list_and_replace()
            raise
        return self._replace_items(items, self._next_generation())

    async def refresh(self) -> bool:
        return bool(await self.run_action('refresh', self._list_and_replace))

    async def submit_create(self, *, form_data: Dict[str, Any]) -> bool:
        async def operation() -> bool:
            form = parse_form(self.form_cls, form_data)
            return await self._write_then_replace(
                self.manage_use_case.create(payload=form.to_payload())
            )

        return bool(await self.run_action('create', operation))

    async def submit_update(self, *, entity_id: str, form_data: Dict[str, Any]) -> bool:
        async def operation() -> bool:
            form = parse_form(self.form_cls, form_data)
            return await self._write_then_replace(
                self.manage_use_case.update(entity_id=entity_id, payload=form.to_payload())
            )

        return bool(await self.run_action(f'update:{entity_id}', operation))

    async def remove(self, *, entity_id: str) -> bool:
        async def operation() -> bool:
            return await self._write_then_replace(
                self.manage_use_case.delete(entity_id=entity_id)
            )

        return bool(await self.run_action(f'delete:{entity_id}', operation))

    def find(self, entity_id: str) -> Optional[_E]:
        return next((item for item in self.items if getattr(item, 'id', None) == entity_id), None)
