"""Error response builder for RFC 9457 Problem Details.

Converts application layer errors into HTTP responses. FORBIDDEN is the one
exception to the Problem Details shape: a refused caller gets a bare 403
with no body.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.errors import ValidationError
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
    ApplicationErrorCode.FORBIDDEN: "Access Denied",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
}


class ErrorResponseBuilder:
    """Build error responses from application errors.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Restaurant not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> Response:
        """Convert ApplicationError to an HTTP response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            Empty 403 response for FORBIDDEN, otherwise a JSONResponse with
            ProblemDetails content.
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        if status_code == status.HTTP_403_FORBIDDEN:
            return Response(status_code=status_code)

        problem = ProblemDetails(
            type=f"/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=ErrorResponseBuilder._field_errors(error),
            trace_id=trace_id or None,
        )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def _field_errors(error: ApplicationError) -> list[ErrorDetail] | None:
        """Collect per-field errors, falling back to a single field domain error."""
        if error.field_errors:
            return [
                ErrorDetail(
                    field=field_error.field or "unknown",
                    code=field_error.code.value,
                    message=field_error.message,
                )
                for field_error in error.field_errors
            ]

        if isinstance(error.domain_error, ValidationError):
            return [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return None

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(
            ...     ApplicationErrorCode.NOT_FOUND
            ... )
            404
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ApplicationErrorCode) -> str:
        return _TITLES.get(code, "Internal Server Error")
