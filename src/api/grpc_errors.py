"""Error wrappers for gRPC services.

Each wrapper builds an ``ErrorResponse`` whose first detail describes the
wrapper's own code and whose following details describe the wrapped errors:

>>> resp = invalid_argument("bad page size", upstream_error)
>>> abort_with(context, grpc.StatusCode.INVALID_ARGUMENT, "bad page size", upstream_error)
"""

from typing import Any, Callable, Dict

import grpc

from .errors import grpc_status_number, grpc_status_text, new_error_response
from .models import ErrorResponse

GRPC_MESSAGE_PREFIX = "[from-grpc]"

ErrorWrapper = Callable[..., ErrorResponse]


def _detail(code: grpc.StatusCode, message: str) -> Dict[str, Any]:
    return {
        "code": grpc_status_number(code),
        "status": grpc_status_text(code),
        "message": message,
    }


def error_to_detail(err: BaseException) -> Dict[str, Any]:
    """Describe an error; RPC errors keep their code and details, others are UNKNOWN."""
    code_fn = getattr(err, "code", None)
    details_fn = getattr(err, "details", None)
    if isinstance(err, grpc.RpcError) and callable(code_fn):
        code = code_fn()
        if isinstance(code, grpc.StatusCode):
            message = details_fn() if callable(details_fn) else str(err)
            return _detail(code, message or "")
    return _detail(grpc.StatusCode.UNKNOWN, str(err))


def grpc_error_wrapper(code: grpc.StatusCode) -> ErrorWrapper:
    """Return a callable ``(message, *errors) -> ErrorResponse`` for ``code``."""

    def wrap(message: str, *errors: BaseException) -> ErrorResponse:
        details = [_detail(code, f"{GRPC_MESSAGE_PREFIX} {message}")]
        details.extend(error_to_detail(err) for err in errors)
        return new_error_response(grpc_code=code, message=message, details=details)

    wrap.__name__ = code.name.lower()
    return wrap


cancelled = grpc_error_wrapper(grpc.StatusCode.CANCELLED)
unknown = grpc_error_wrapper(grpc.StatusCode.UNKNOWN)
invalid_argument = grpc_error_wrapper(grpc.StatusCode.INVALID_ARGUMENT)
deadline_exceeded = grpc_error_wrapper(grpc.StatusCode.DEADLINE_EXCEEDED)
not_found = grpc_error_wrapper(grpc.StatusCode.NOT_FOUND)
already_exists = grpc_error_wrapper(grpc.StatusCode.ALREADY_EXISTS)
permission_denied = grpc_error_wrapper(grpc.StatusCode.PERMISSION_DENIED)
resource_exhausted = grpc_error_wrapper(grpc.StatusCode.RESOURCE_EXHAUSTED)
failed_precondition = grpc_error_wrapper(grpc.StatusCode.FAILED_PRECONDITION)
aborted = grpc_error_wrapper(grpc.StatusCode.ABORTED)
out_of_range = grpc_error_wrapper(grpc.StatusCode.OUT_OF_RANGE)
unimplemented = grpc_error_wrapper(grpc.StatusCode.UNIMPLEMENTED)
internal = grpc_error_wrapper(grpc.StatusCode.INTERNAL)
unavailable = grpc_error_wrapper(grpc.StatusCode.UNAVAILABLE)
data_loss = grpc_error_wrapper(grpc.StatusCode.DATA_LOSS)
unauthenticated = grpc_error_wrapper(grpc.StatusCode.UNAUTHENTICATED)


def abort_with(context: grpc.ServicerContext, code: grpc.StatusCode, message: str, *errors: BaseException) -> None:
    """Abort an RPC with the JSON error response as status details. Always raises."""
    response = grpc_error_wrapper(code)(message, *errors)
    context.abort(code, response.model_dump_json())
