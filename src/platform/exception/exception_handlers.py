from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    Logger.base.warning(
        f'⚠️ [HTTP] {request.method} {request.url.path} -> {error.status_code}: {error.message}'
    )
    return JSONResponse(status_code=error.status_code, content={'detail': error.message})

async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.warning(f'⚠️ [HTTP] {request.method} {request.url.path} -> 400: {exc}')
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})

async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    Logger.base.warning(f'⚠️ [HTTP] {request.method} {request.url.path} -> invalid request')
    # Error contexts may hold exception objects that are not JSON serializable
    detail = [
        {'loc': list(error.get('loc', ())), 'msg': error.get('msg', ''), 'type': error.get('type')}
        for error in errors
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': detail})

async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [HTTP] {request.method} {request.url.path} -> unhandled {type(exc).__name__}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )

EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}

def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
