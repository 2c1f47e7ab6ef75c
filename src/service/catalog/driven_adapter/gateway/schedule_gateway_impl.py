from typing import Any, Mapping

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_schedule_gateway import IScheduleGateway
from src.service.catalog.driven_adapter.gateway.rest_catalog_gateway import RestCatalogGateway
from src.service.catalog.domain.entity.schedule_entity import Schedule


class ScheduleGatewayImpl(RestCatalogGateway[Schedule], IScheduleGateway):
    resource_name = 'schedules'
    list_path = '/schedules/public'
    create_path = '/schedules/public'
    item_path = '/schedules/public/{id}'

    def to_entity(self, data: Mapping[str, Any]) -> Schedule:
        return Schedule.from_dict(data)

    @Logger.io
    async def get_by_id(self, *, schedule_id: str) -> Schedule:
        # The backend only exposes the public list for reads
        for schedule in await self.list_all():
            if schedule.id == schedule_id:
                return schedule
        raise NotFoundError(f'Schedule {schedule_id} not found')
