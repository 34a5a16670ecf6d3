"""Build error responses for HTTP and gRPC APIs."""

from http import HTTPStatus
from typing import Any, Iterable, List, Optional

import grpc
from starlette.exceptions import HTTPException

from .models import ErrorDetail, ErrorResponse


def http_status_text(code: int) -> str:
    """Return the reason phrase of an HTTP code, or empty string if unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def grpc_status_text(code: grpc.StatusCode) -> str:
    """Return the name of a gRPC status code, e.g. ``INVALID_ARGUMENT``."""
    return code.name


def grpc_status_number(code: grpc.StatusCode) -> int:
    return code.value[0]


JSON_SCALAR_TYPES = (str, int, float, bool, type(None))


def _jsonable(value: Any) -> Any:
    """Coerce a detail into plain JSON types; unknown objects become their ``str``."""
    if isinstance(value, JSON_SCALAR_TYPES):
        return value
    if isinstance(value, dict):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return str(value)


def flatten_details(details: Iterable[Any]) -> List[Any]:
    """
    Normalise error details into JSON-friendly values.

    - ``HTTPException`` becomes ``{"status_code", "detail"}``
    - ``ErrorDetail`` / ``ErrorResponse`` contribute their own details
    - other exceptions become their message
    - JSON values are kept as is, other objects become their ``str``
    """
    res: List[Any] = []
    for detail in details:
        if isinstance(detail, HTTPException):
            res.append({"status_code": detail.status_code, "detail": _jsonable(detail.detail)})
        elif isinstance(detail, ErrorDetail):
            res.extend(_jsonable(item) for item in detail.details)
        elif isinstance(detail, ErrorResponse):
            res.extend(_jsonable(item) for item in detail.error.details)
        elif isinstance(detail, BaseException):
            res.append(str(detail))
        else:
            res.append(_jsonable(detail))
    return res


def new_error_response(
    http_code: Optional[int] = None,
    grpc_code: Optional[grpc.StatusCode] = None,
    status: Optional[str] = None,
    message: str = "",
    details: Optional[Iterable[Any]] = None,
) -> ErrorResponse:
    """
    Create an error response.

    Defaults to 500 / ``Internal Server Error``. A gRPC code takes precedence
    over an HTTP code; an explicit ``status`` replaces the derived text.

    Args:
        http_code: HTTP status code.
        grpc_code: gRPC status code.
        status: Text of the code.
        message: Error message.
        details: Details of any type, see ``flatten_details``.

    Returns:
        ErrorResponse instance.
    """
    code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    status_text = HTTPStatus.INTERNAL_SERVER_ERROR.phrase

    if grpc_code is not None:
        code = grpc_status_number(grpc_code)
        status_text = grpc_status_text(grpc_code)
    elif http_code is not None:
        code = http_code
        status_text = http_status_text(http_code)

    if status is not None:
        status_text = status

    return ErrorResponse(
        error=ErrorDetail(
            code=code,
            status=status_text,
            message=message,
            details=flatten_details(details or []),
        )
    )


def from_error(err: Optional[BaseException]) -> ErrorResponse:
    """Wrap an exception into a 500 error response."""
    if err is None:
        err = Exception("unknown error")
    return new_error_response(message=str(err))
