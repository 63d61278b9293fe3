"""Account handler factories.

Request-scoped handlers for registration, login and policy checks.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.queries.handlers.check_policy_handler import (
        CheckPolicyHandler,
    )


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Dependencies:
    - UserRepository (request-scoped, uses session)
    - BcryptPasswordService (app-scoped singleton)
    - EventBus (app-scoped singleton)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        event_bus=get_event_bus(),
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        event_bus=get_event_bus(),
    )


async def get_check_policy_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CheckPolicyHandler":
    """Get CheckPolicy query handler (request-scoped).

    The policy evaluator needs the restaurant repository for the
    created-restaurants requirement.
    """
    from src.application.queries.handlers.check_policy_handler import (
        CheckPolicyHandler,
    )
    from src.application.services.authorization_policies import (
        AuthorizationPolicyEvaluator,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    evaluator = AuthorizationPolicyEvaluator(
        restaurant_repo=RestaurantRepository(session=session)
    )
    return CheckPolicyHandler(evaluator=evaluator)
