"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of API endpoints. Paths are
relative to the ``/api`` prefix applied by ``api_router``.

Registry structure:
    - 13 endpoints across 4 resource categories
    - Listing, single gets, register, login and weather are public
    - Mutations and the policy probe require a bearer token

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.accounts import (
    check_policy,
    login_user,
    register_user,
)
from src.presentation.routers.api.dishes import (
    create_dish,
    delete_dishes,
    get_dish,
    list_dishes,
)
from src.presentation.routers.api.restaurants import (
    create_restaurant,
    delete_restaurant,
    get_restaurant,
    list_restaurants,
    update_restaurant,
)
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.presentation.routers.api.weather import get_weather_forecast
from src.schemas.account_schemas import (
    LoginResponse,
    PolicyCheckResponse,
    RegisterUserResponse,
)
from src.schemas.restaurant_schemas import (
    DishResponse,
    RestaurantListResponse,
    RestaurantResponse,
)
from src.schemas.weather_schemas import WeatherForecastResponse

_PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
_AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid token")
_FORBIDDEN = ErrorSpec(status=403, description="Caller does not own the restaurant")
_RESTAURANT_NOT_FOUND = ErrorSpec(status=404, description="Restaurant not found")
_VALIDATION = ErrorSpec(status=400, description="Validation error")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Restaurants Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/restaurant",
        handler=list_restaurants,
        resource="restaurants",
        tags=["Restaurants"],
        summary="List restaurants",
        description="Search by name or category, sort by an allowed column, "
        "and page with pageSize in 5, 10 or 15.",
        operation_id="list_restaurants",
        response_model=RestaurantListResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/restaurant/{restaurant_id}",
        handler=get_restaurant,
        resource="restaurants",
        tags=["Restaurants"],
        summary="Get restaurant",
        operation_id="get_restaurant",
        response_model=RestaurantResponse,
        errors=[_RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/restaurant",
        handler=create_restaurant,
        resource="restaurants",
        tags=["Restaurants"],
        summary="Create restaurant",
        description="Create a restaurant owned by the caller. "
        "Returns its URL in the Location header.",
        operation_id="create_restaurant",
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/restaurant/{restaurant_id}",
        handler=update_restaurant,
        resource="restaurants",
        tags=["Restaurants"],
        summary="Update restaurant",
        operation_id="update_restaurant",
        errors=[_VALIDATION, _UNAUTHORIZED, _FORBIDDEN, _RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/restaurant/{restaurant_id}",
        handler=delete_restaurant,
        resource="restaurants",
        tags=["Restaurants"],
        summary="Delete restaurant",
        description="Delete a restaurant together with its address and dishes.",
        operation_id="delete_restaurant",
        status_code=204,
        errors=[_UNAUTHORIZED, _FORBIDDEN, _RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Dishes Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/restaurant/{restaurant_id}/dish",
        handler=list_dishes,
        resource="dishes",
        tags=["Dishes"],
        summary="List dishes",
        operation_id="list_dishes",
        response_model=list[DishResponse],
        errors=[_RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/restaurant/{restaurant_id}/dish/{dish_id}",
        handler=get_dish,
        resource="dishes",
        tags=["Dishes"],
        summary="Get dish",
        operation_id="get_dish",
        response_model=DishResponse,
        errors=[ErrorSpec(status=404, description="Restaurant or dish not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/restaurant/{restaurant_id}/dish",
        handler=create_dish,
        resource="dishes",
        tags=["Dishes"],
        summary="Create dish",
        operation_id="create_dish",
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED, _FORBIDDEN, _RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/restaurant/{restaurant_id}/dish",
        handler=delete_dishes,
        resource="dishes",
        tags=["Dishes"],
        summary="Delete all dishes",
        operation_id="delete_dishes",
        status_code=204,
        errors=[_UNAUTHORIZED, _FORBIDDEN, _RESTAURANT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Account Resource (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/account/register",
        handler=register_user,
        resource="account",
        tags=["Account"],
        summary="Register user",
        operation_id="register_user",
        response_model=RegisterUserResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/account/login",
        handler=login_user,
        resource="account",
        tags=["Account"],
        summary="Login",
        description="Exchange email and password for a bearer token.",
        operation_id="login_user",
        response_model=LoginResponse,
        errors=[ErrorSpec(status=401, description="Invalid username or password")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/account/policies/{policy}",
        handler=check_policy,
        resource="account",
        tags=["Account"],
        summary="Check policy",
        description="Succeeds only when the caller satisfies the named policy.",
        operation_id="check_policy",
        response_model=PolicyCheckResponse,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="Policy not satisfied"),
            ErrorSpec(status=404, description="Unknown policy"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Weather Forecast (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/weatherforecast",
        handler=get_weather_forecast,
        resource="weather",
        tags=["Weather"],
        summary="Weather forecast",
        operation_id="get_weather_forecast",
        response_model=list[WeatherForecastResponse],
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
]
