"""Authentication domain events.

Registration and login emit a three-state lifecycle:

    1. ATTEMPTED - Published BEFORE the operation
    2. SUCCEEDED - Published AFTER the operation completed
    3. FAILED - Published when the operation was refused

Events never carry passwords or tokens.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ============================================================================
# User Registration Events
# ============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserRegistrationAttempted(DomainEvent):
    """User registration was attempted (BEFORE validation)."""

    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class UserRegistrationSucceeded(DomainEvent):
    """User was registered.

    Attributes:
        user_id: ID of the new user.
        email: Registered email.
        role: Role claim assigned to the user.
    """

    user_id: UUID
    email: str
    role: str


@dataclass(frozen=True, kw_only=True, slots=True)
class UserRegistrationFailed(DomainEvent):
    """User registration was refused.

    Attributes:
        email: Email from the attempt.
        reason: Machine-readable reason (e.g. "validation_failed", "email_taken").
    """

    email: str
    reason: str


# ============================================================================
# User Login Events
# ============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginAttempted(DomainEvent):
    """Login was attempted (BEFORE credential check)."""

    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginSucceeded(DomainEvent):
    """Credentials were accepted and an access token issued."""

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginFailed(DomainEvent):
    """Login was refused.

    Attributes:
        email: Email from the attempt.
        reason: "user_not_found" or "invalid_password". Only logged server-side;
            the caller always receives the same 401.
    """

    email: str
    reason: str
