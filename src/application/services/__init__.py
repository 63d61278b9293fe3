"""Application services shared by several handlers."""

from src.application.services.authorization_policies import (
    POLICY_REGISTRY,
    AuthorizationPolicyEvaluator,
    CreatedMultipleRestaurants,
    HasNationality,
    MinimumAge,
    Requirement,
)
from src.application.services.ownership_verifier import RestaurantOwnershipVerifier

__all__ = [
    "POLICY_REGISTRY",
    "AuthorizationPolicyEvaluator",
    "CreatedMultipleRestaurants",
    "HasNationality",
    "MinimumAge",
    "Requirement",
    "RestaurantOwnershipVerifier",
]
