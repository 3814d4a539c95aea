"""
Event Registration FastAPI Application

Registration processing runs in a task group owned by the application
lifespan; pending flows are torn down before the group is cancelled.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Registration Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Registration Service] Dependency injection wired')

    async with anyio.create_task_group() as tg:
        container.background_task_group.override(tg)
        Logger.base.info('✅ [Registration Service] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Registration Service] Shutting down...')
        await container.registration_session_registry().close_all()
        Logger.base.info('🧹 [Registration Service] Pending registrations closed')
        tg.cancel_scope.cancel()

    container.background_task_group.reset_override()
    container.unwire()

    Logger.base.info('👋 [Registration Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
