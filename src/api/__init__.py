"""Error responses for HTTP (FastAPI) and gRPC services."""

from .models import ErrorDetail, ErrorResponse
from .errors import (
    new_error_response,
    from_error,
    flatten_details,
    http_status_text,
    grpc_status_text,
)
from .exceptions import APIException
from .exception_handlers import register_exception_handlers, error_json_response
from .grpc_errors import grpc_error_wrapper, error_to_detail, abort_with

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "new_error_response",
    "from_error",
    "flatten_details",
    "http_status_text",
    "grpc_status_text",
    "APIException",
    "register_exception_handlers",
    "error_json_response",
    "grpc_error_wrapper",
    "error_to_detail",
    "abort_with",
]
