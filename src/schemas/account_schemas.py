"""Account request/response schemas.

Endpoints:
    POST /api/account/register          - Register (200 OK)
    POST /api/account/login             - Login, returns bearer token (200 OK)
    GET  /api/account/policies/{policy} - Probe a requirement policy
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import EmailAddress, Nationality


# =============================================================================
# Registration
# =============================================================================


class RegisterUserRequest(BaseModel):
    """Request schema for registration.

    Presence, format and password rules are checked by the application
    validator so all failing fields come back in one 400 response.
    """

    email: EmailAddress | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="Password (min 6 chars)")
    confirm_password: str | None = Field(None, description="Must equal password")
    date_of_birth: date | None = Field(None, description="Date of birth")
    nationality: Nationality = None
    role: str = Field("User", description="User, Manager or Admin")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "password123",
                "confirm_password": "password123",
                "date_of_birth": "1990-05-17",
                "nationality": "Polish",
            }
        }
    )


class RegisterUserResponse(BaseModel):
    """Response schema for registration."""

    id: UUID = Field(..., description="Created user's ID")
    email: str = Field(..., description="User's email address")


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailAddress = Field(..., description="User's email address")
    password: str = Field(..., max_length=128, description="User's password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "password123",
            }
        }
    )


class LoginResponse(BaseModel):
    """Bearer token issued on login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )
    expires_in: int = Field(..., description="Access token lifetime in seconds")


# =============================================================================
# Policies
# =============================================================================


class PolicyCheckResponse(BaseModel):
    """Returned only when the caller satisfies the policy."""

    policy: str = Field(..., description="Policy name")
    satisfied: bool = Field(True, description="Always true (403 otherwise)")
