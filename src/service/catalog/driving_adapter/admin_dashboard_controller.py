from typing import Optional

from src.platform.screen.base_screen_controller import BaseScreenController
from src.service.catalog.app.query.get_admin_dashboard_use_case import (
    AdminDashboardStats,
    GetAdminDashboardUseCase,
)


class AdminDashboardController(BaseScreenController):
    """Entity counts for the admin landing screen; a failed refresh keeps the last counts"""

    def __init__(self, *, get_admin_dashboard_use_case: GetAdminDashboardUseCase) -> None:
        super().__init__()
        self.get_admin_dashboard_use_case = get_admin_dashboard_use_case
        self.stats: Optional[AdminDashboardStats] = None

    async def refresh(self) -> bool:
        async def operation() -> bool:
            self.stats = await self.get_admin_dashboard_use_case.execute()
            return True

        return bool(await self.run_action('refresh', operation))
