"""Authentication error message constants.

These are NOT exceptions - they are error value constants used in Result
types (railway-oriented programming).

Usage:
    result = token_service.validate_access_token(token)
    match result:
        case Success(value=payload):
            ...
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Credential failures deliberately share one message so the caller cannot
    tell an unknown email from a wrong password.
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"

    # Credential validation errors
    INVALID_CREDENTIALS = "Invalid username or password"
