"""Global exception handlers for FastAPI application.

Converts exceptions that escape route handlers into RFC 9457 Problem
Details responses. Nothing reaches the caller as a raw stack trace.

Handlers:
    http_exception_handler: HTTPException (auth dependencies, routing 404/405)
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: Anything else -> logged 500

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


UNHANDLED_ERROR_DETAIL = "Something went wrong.."

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
}

# Request locations stripped from field paths ("query.pageSize" -> "pageSize")
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header"})


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for the problem type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _trace_id(request: Request) -> str | None:
    # Set by TraceMiddleware; survives after the contextvar is cleared
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> Response:
    """Convert HTTPException to a Problem Details response.

    A 403 keeps the bodiless shape used for refused callers everywhere else.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by a handler, dependency or the router.

    Returns:
        JSONResponse with ProblemDetails (or an empty 403).
    """
    assert isinstance(exc, StarletteHTTPException)

    headers = getattr(exc, "headers", None)

    if exc.status_code == status.HTTP_403_FORBIDDEN:
        return Response(status_code=exc.status_code, headers=headers)

    problem = ProblemDetails(
        type=f"/errors/{_get_error_slug(exc.status_code)}",
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=_trace_id(request),
    )

    # Preserve headers (e.g., WWW-Authenticate)
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response.

    Malformed bodies and query values that cannot bind (``pageSize=abc``)
    are reported the same way as application validation failures.

    Example:
        >>> # GET /api/restaurant?pageSize=abc&pageNumber=1
        >>> # {
        >>> #   "type": "/errors/validation-failed",
        >>> #   "title": "Validation Failed",
        >>> #   "status": 400,
        >>> #   "errors": [{"field": "pageSize", "code": "int_parsing", ...}]
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type="/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the full error server-side and returns a fixed message so internal
    details never leak to API consumers.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type="/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=UNHANDLED_ERROR_DETAIL,
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
