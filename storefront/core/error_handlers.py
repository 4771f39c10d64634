# storefront/core/error_handlers.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.exceptions import ClientError, InvalidInput
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR = "an unexpected error occurred"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def cannot_route_message(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return f"cannot {request.method} {path}"


def setup_error_handlers(app: FastAPI):
    """Map every failure onto the ``{"error": ...}`` envelope."""

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return error_response(InvalidInput.status_code, "invalid entry")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405) and (request.url.path == "/api" or request.url.path.startswith("/api/")):
            return error_response(404, cannot_route_message(request))
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, UNEXPECTED_ERROR)
