"""CheckPolicy query handler.

Resolves a named requirement policy and evaluates it for the principal.
Unknown policy -> NOT_FOUND; unsatisfied -> FORBIDDEN.
"""

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.policy_queries import CheckPolicy
from src.application.services.authorization_policies import (
    POLICY_REGISTRY,
    AuthorizationPolicyEvaluator,
    Requirement,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Result, Success


class CheckPolicyHandler:
    """Handler for CheckPolicy query."""

    def __init__(
        self,
        evaluator: AuthorizationPolicyEvaluator,
        policies: dict[str, Requirement] | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._policies = POLICY_REGISTRY if policies is None else policies

    async def handle(self, query: CheckPolicy) -> Result[str, ApplicationError]:
        requirement = self._policies.get(query.policy_name)
        if requirement is None:
            message = f"Policy '{query.policy_name}' does not exist"
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=message,
                    domain_error=NotFoundError(
                        code=ErrorCode.POLICY_NOT_FOUND,
                        message=message,
                        resource_type="Policy",
                        resource_id=query.policy_name,
                    ),
                )
            )

        if not await self._evaluator.evaluate(query.principal, requirement):
            message = f"Policy '{query.policy_name}' is not satisfied"
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message=message,
                    domain_error=AuthorizationError(
                        code=ErrorCode.POLICY_NOT_SATISFIED,
                        message=message,
                        required_permission=query.policy_name,
                    ),
                )
            )

        return Success(value=query.policy_name)
