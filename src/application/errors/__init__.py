"""Errors returned by command and query handlers.

Handlers never raise for expected failures (bad input, missing restaurant,
foreign ownership, bad credentials); they return ``Failure(ApplicationError)``
and the presentation layer picks the HTTP status from its code.
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]
