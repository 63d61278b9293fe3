"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_logger, get_list_restaurants_handler

Organisation:
- infrastructure: database, password/token services, logger, db session
- events: event bus and subscriptions
- auth_handlers: register, login and policy handler factories
- restaurant_handlers: restaurant, dish and weather handler factories

App-scoped singletons are ``lru_cache``d; request-scoped factories are
FastAPI dependencies and are overridden in tests through
``app.dependency_overrides``.
"""

from src.core.container.auth_handlers import (
    get_check_policy_handler,
    get_login_user_handler,
    get_register_user_handler,
)
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.restaurant_handlers import (
    get_create_dish_handler,
    get_create_restaurant_handler,
    get_delete_dishes_handler,
    get_delete_restaurant_handler,
    get_get_dish_handler,
    get_get_restaurant_handler,
    get_list_dishes_handler,
    get_list_restaurants_handler,
    get_update_restaurant_handler,
    get_weather_forecast_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Events
    "get_event_bus",
    # Account handlers
    "get_check_policy_handler",
    "get_login_user_handler",
    "get_register_user_handler",
    # Restaurant, dish and weather handlers
    "get_create_dish_handler",
    "get_create_restaurant_handler",
    "get_delete_dishes_handler",
    "get_delete_restaurant_handler",
    "get_get_dish_handler",
    "get_get_restaurant_handler",
    "get_list_dishes_handler",
    "get_list_restaurants_handler",
    "get_update_restaurant_handler",
    "get_weather_forecast_handler",
]
