"""Requirement-based authorization policies.

A closed set of requirement variants evaluated by a single dispatcher, plus
the registry of named policies exposed by the API.

Requirements:
    - CreatedMultipleRestaurants(minimum): principal created >= minimum restaurants
    - MinimumAge(years): principal is at least ``years`` old today
    - HasNationality(allowed): principal's nationality claim is in ``allowed``

Each evaluation is stateless; only CreatedMultipleRestaurants touches the
store (a single count query).

Usage:
    evaluator = AuthorizationPolicyEvaluator(restaurant_repo)
    requirement = POLICY_REGISTRY["CreatedAtLeast2Restaurants"]
    allowed = await evaluator.evaluate(principal, requirement)
"""

from dataclasses import dataclass
from datetime import date

from src.application.dtos.auth_dtos import Principal
from src.domain.protocols.restaurant_repository import RestaurantRepository


@dataclass(frozen=True)
class CreatedMultipleRestaurants:
    minimum: int


@dataclass(frozen=True)
class MinimumAge:
    years: int


@dataclass(frozen=True)
class HasNationality:
    allowed: frozenset[str]


Requirement = CreatedMultipleRestaurants | MinimumAge | HasNationality

POLICY_REGISTRY: dict[str, Requirement] = {
    "CreatedAtLeast2Restaurants": CreatedMultipleRestaurants(minimum=2),
    "AtLeast20": MinimumAge(years=20),
    "HasNationality": HasNationality(allowed=frozenset({"German", "Polish"})),
}


def age_on(date_of_birth: date, today: date) -> int:
    """Full years between ``date_of_birth`` and ``today``.

    A Feb 29 birthday falls on Feb 28 in common years.

    Example:
        >>> age_on(date(2000, 2, 29), date(2021, 2, 28))
        21
    """
    try:
        birthday = date_of_birth.replace(year=today.year)
    except ValueError:
        birthday = date(today.year, 2, 28)
    return today.year - date_of_birth.year - (0 if today >= birthday else 1)


class AuthorizationPolicyEvaluator:
    """Dispatcher evaluating any requirement variant for a principal."""

    def __init__(self, restaurant_repo: RestaurantRepository) -> None:
        self._restaurant_repo = restaurant_repo

    async def evaluate(self, principal: Principal, requirement: Requirement) -> bool:
        """Return True when the principal satisfies the requirement.

        Missing claims (no date of birth, no nationality) never satisfy a
        requirement that needs them.
        """
        match requirement:
            case CreatedMultipleRestaurants(minimum=minimum):
                created = await self._restaurant_repo.count_by_creator(
                    principal.user_id
                )
                return created >= minimum
            case MinimumAge(years=years):
                if principal.date_of_birth is None:
                    return False
                return age_on(principal.date_of_birth, date.today()) >= years
            case HasNationality(allowed=allowed):
                return principal.nationality in allowed
        return False
