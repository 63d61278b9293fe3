"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, protocols
(ports), and domain events. The domain layer has NO dependencies on any
framework or infrastructure.

Structure:
- entities/: Restaurant, Dish, User
- value_objects/: Address
- enums/: UserRole, SortDirection, RestaurantSortColumn
- protocols/: Repository and service interfaces
- events/: Restaurant and authentication events
"""
