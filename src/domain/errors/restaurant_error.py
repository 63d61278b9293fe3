"""Restaurant and dish error message constants."""


class RestaurantError:
    """Restaurant error constants (messages used in Failure results)."""

    RESTAURANT_NOT_FOUND = "Restaurant not found"
    DISH_NOT_FOUND = "Dish not found"
    NOT_OWNER = "You are not allowed to modify this restaurant"
