from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, StorageError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

INTERNAL_SERVER_ERROR_MESSAGE = 'Internal server error'


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    # Store failures keep their detail operator-side
    if isinstance(error, StorageError) or error.status_code >= 500:
        Logger.base.error(f'[{request.method} {request.url.path}] {type(error).__name__}: {error}')
        return JSONResponse(
            status_code=error.status_code, content={'message': INTERNAL_SERVER_ERROR_MESSAGE}
        )
    return JSONResponse(status_code=error.status_code, content={'message': error.message})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # A rejected body is reported like any failed write; field errors stay in the logs
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    Logger.base.warning(
        f'[{request.method} {request.url.path}] Invalid request body: {jsonable_encoder(error.errors())}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': INTERNAL_SERVER_ERROR_MESSAGE},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'[{request.method} {request.url.path}] {type(exc).__name__}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': INTERNAL_SERVER_ERROR_MESSAGE},
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
