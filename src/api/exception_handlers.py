"""Exception handlers for FastAPI applications."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.shared.logging_utils import get_logger

from .errors import from_error, new_error_response
from .exceptions import APIException
from .models import ErrorResponse

logger = get_logger(__name__)


def _http_status_code(code: int) -> int:
    # gRPC codes and other non-HTTP codes are served as 500
    if 100 <= code <= 599:
        return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_json_response(response: ErrorResponse) -> JSONResponse:
    """Render an ErrorResponse with the matching HTTP status code."""
    return JSONResponse(
        status_code=_http_status_code(response.error.code),
        content=response.model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers for the FastAPI application."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle API exceptions."""
        return error_json_response(exc.response)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions raised by routes and by routing itself (404, 405)."""
        response = error_json_response(
            new_error_response(
                http_code=exc.status_code,
                message=str(exc.detail),
            )
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        return error_json_response(
            new_error_response(
                http_code=status.HTTP_400_BAD_REQUEST,
                message="Request validation failed",
                details=[
                    {
                        "type": error.get("type"),
                        "loc": [str(part) for part in error.get("loc", ())],
                        "msg": error.get("msg"),
                    }
                    for error in exc.errors()
                ],
            )
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Handle anything routes didn't handle themselves."""
        logger.error(
            f"Unhandled exception in {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_json_response(from_error(exc))
