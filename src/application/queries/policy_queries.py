"""Authorization policy query."""

from dataclasses import dataclass

from src.application.dtos.auth_dtos import Principal


@dataclass(frozen=True, kw_only=True)
class CheckPolicy:
    """Evaluate a named requirement policy for the principal.

    Attributes:
        principal: Caller whose claims are evaluated.
        policy_name: Registered policy name (e.g. ``CreatedAtLeast2Restaurants``).
    """

    principal: Principal
    policy_name: str
