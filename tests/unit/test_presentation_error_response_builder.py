"""Unit tests for ErrorResponseBuilder."""

import json
from unittest.mock import MagicMock

import pytest

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.presentation.routers.api.errors import ErrorResponseBuilder


def _request(path: str) -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestErrorResponseBuilder:
    def test_not_found_problem_details(self):
        error = ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message="Restaurant not found",
        )
        trace_id = "550e8400-e29b-41d4-a716-446655440000"

        response = ErrorResponseBuilder.from_application_error(
            error=error,
            request=_request("/api/restaurant/123"),
            trace_id=trace_id,
        )

        assert response.status_code == 404
        body = json.loads(bytes(response.body))
        assert body["type"] == "/errors/not_found"
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "Restaurant not found"
        assert body["instance"] == "/api/restaurant/123"
        assert body["trace_id"] == trace_id
        assert "errors" not in body

    def test_validation_failure_lists_every_field(self):
        errors = [
            ValidationError(
                code=ErrorCode.INVALID_PAGE_NUMBER,
                message="PageNumber must be greater than or equal to 1",
                field="pageNumber",
            ),
            ValidationError(
                code=ErrorCode.INVALID_PAGE_SIZE,
                message="PageSize must in [5,10,15]",
                field="pageSize",
            ),
        ]
        error = ApplicationError.validation_failed(
            errors, code=ApplicationErrorCode.QUERY_VALIDATION_FAILED
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/restaurant"), trace_id=""
        )

        assert response.status_code == 400
        body = json.loads(bytes(response.body))
        assert [e["field"] for e in body["errors"]] == ["pageNumber", "pageSize"]
        assert body["errors"][1]["code"] == "invalid_page_size"
        assert "trace_id" not in body

    def test_single_domain_validation_error_is_listed(self):
        error = ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message="That email is taken",
            domain_error=ValidationError(
                code=ErrorCode.EMAIL_ALREADY_EXISTS,
                message="That email is taken",
                field="email",
            ),
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/account/register"), trace_id="t"
        )

        body = json.loads(bytes(response.body))
        assert body["errors"] == [
            {
                "field": "email",
                "code": "email_already_exists",
                "message": "That email is taken",
            }
        ]

    def test_forbidden_has_no_body(self):
        error = ApplicationError(
            code=ApplicationErrorCode.FORBIDDEN,
            message="You are not allowed to modify this restaurant",
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/restaurant/1"), trace_id="t"
        )

        assert response.status_code == 403
        assert response.body == b""

    def test_unauthorized_advertises_bearer(self):
        error = ApplicationError(
            code=ApplicationErrorCode.UNAUTHORIZED,
            message="Invalid username or password",
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/account/login"), trace_id="t"
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.parametrize(
        ("code", "expected_status"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.QUERY_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.UNAUTHORIZED, 401),
            (ApplicationErrorCode.FORBIDDEN, 403),
            (ApplicationErrorCode.NOT_FOUND, 404),
        ],
    )
    def test_status_mapping(self, code, expected_status):
        assert ErrorResponseBuilder._get_status_code(code) == expected_status
