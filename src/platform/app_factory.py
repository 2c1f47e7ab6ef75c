"""Client bootstrap: explicit startup (session restore) and shutdown (close transport)."""

from typing import Optional

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger


async def startup(settings: Optional[Settings] = None) -> Container:
    app_container = Container()
    if settings is not None:
        app_container.config_service.override(settings)

    config = app_container.config_service()
    restored = await app_container.session().init_on_load()
    Logger.base.info(
        f'🚌 {config.PROJECT_NAME} v{config.VERSION} -> {config.API_BASE_URL} '
        f'(session restored: {restored})'
    )
    return app_container


async def shutdown(app_container: Container) -> None:
    await app_container.api_client().aclose()
    app_container.reset_singletons()
    Logger.base.info('🛑 Client shut down')
