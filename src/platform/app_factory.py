"""
FastAPI App Factory

Shared by the production entrypoint and the test suite so both serve the same
routers, middleware and exception handlers.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.registration.driving_adapter.http_controller.event_offer_controller import (
    router as event_offer_router,
)
from src.service.registration.driving_adapter.http_controller.organizer_controller import (
    router as organizer_router,
)
from src.service.registration.driving_adapter.http_controller.registration_controller import (
    router as registration_router,
)
from src.service.registration.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event Registration',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(event_offer_router, prefix='/api/event', tags=['event'])
    app.include_router(registration_router, prefix='/api/registration', tags=['registration'])
    app.include_router(ticket_router, prefix='/api/ticket', tags=['ticket'])
    app.include_router(organizer_router, prefix='/api/organizer', tags=['organizer'])

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app
