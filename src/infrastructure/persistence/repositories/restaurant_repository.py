"""RestaurantRepository - SQLAlchemy implementation of RestaurantRepository protocol.

Adapter for hexagonal architecture. Restaurants are loaded with their
address and dishes (selectin relationships) and mapped to the domain
``Restaurant`` aggregate.

Listing:
    ``search`` applies the search phrase, the sort column and the page window
    in SQL, and runs a second COUNT over the filtered (unpaged) statement so
    clients can compute the number of pages.
"""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dish import Dish
from src.domain.entities.restaurant import Restaurant
from src.domain.enums import RestaurantSortColumn, SortDirection
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models.restaurant import Address as AddressModel
from src.infrastructure.persistence.models.restaurant import (
    Restaurant as RestaurantModel,
)

# Allow-listed sort columns mapped to ORM attributes
_SORT_COLUMNS = {
    RestaurantSortColumn.NAME: RestaurantModel.name,
    RestaurantSortColumn.DESCRIPTION: RestaurantModel.description,
    RestaurantSortColumn.CATEGORY: RestaurantModel.category,
}


class RestaurantRepository:
    """SQLAlchemy implementation of RestaurantRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> repo = RestaurantRepository(session)
        >>> page, total = await repo.search(
        ...     search_phrase="pizza",
        ...     sort_by=RestaurantSortColumn.NAME,
        ...     sort_direction=SortDirection.ASC,
        ...     offset=0,
        ...     limit=5,
        ... )
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, restaurant_id: UUID) -> Restaurant | None:
        """Find restaurant by ID.

        Args:
            restaurant_id: Restaurant's unique identifier.

        Returns:
            Domain Restaurant (with address and dishes) if found, None otherwise.
        """
        model = await self._get_model(restaurant_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def search(
        self,
        *,
        search_phrase: str | None,
        sort_by: RestaurantSortColumn | None,
        sort_direction: SortDirection,
        offset: int,
        limit: int,
    ) -> tuple[list[Restaurant], int]:
        """Filter, sort and page restaurants.

        Args:
            search_phrase: Case-insensitive substring of name or category.
            sort_by: Allow-listed column, or None for id order.
            sort_direction: ASC or DESC.
            offset: Rows to skip.
            limit: Page size.

        Returns:
            Tuple of (restaurants on the page, total matching rows).
        """
        stmt = select(RestaurantModel)

        if search_phrase and search_phrase.strip():
            phrase = search_phrase.strip().lower()
            stmt = stmt.where(
                or_(
                    func.lower(RestaurantModel.name).contains(phrase, autoescape=True),
                    func.lower(RestaurantModel.category).contains(
                        phrase, autoescape=True
                    ),
                )
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        if sort_by is not None:
            column = _SORT_COLUMNS[sort_by]
            ordered = column.desc() if sort_direction == SortDirection.DESC else column.asc()
            # id as tie-breaker keeps pages stable for equal sort keys
            stmt = stmt.order_by(ordered, RestaurantModel.id)
        else:
            stmt = stmt.order_by(RestaurantModel.id)

        stmt = stmt.offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models], total

    async def count_by_creator(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(RestaurantModel)
            .where(RestaurantModel.created_by_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, restaurant: Restaurant) -> None:
        """Add restaurant and its address to the current unit of work."""
        model = RestaurantModel(
            id=restaurant.id,
            name=restaurant.name,
            description=restaurant.description,
            category=restaurant.category,
            has_delivery=restaurant.has_delivery,
            contact_email=restaurant.contact_email,
            contact_number=restaurant.contact_number,
            created_by_id=restaurant.created_by_id,
            address=AddressModel(
                city=restaurant.address.city,
                street=restaurant.address.street,
                postal_code=restaurant.address.postal_code,
            ),
            dishes=[],
        )
        self.session.add(model)
        await self.session.flush()

    async def update(self, restaurant: Restaurant) -> None:
        """Persist the mutable fields of an existing restaurant.

        Raises:
            NoResultFound: If the restaurant no longer exists.
        """
        stmt = select(RestaurantModel).where(RestaurantModel.id == restaurant.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.name = restaurant.name
        model.description = restaurant.description
        model.has_delivery = restaurant.has_delivery

        await self.session.flush()

    async def delete(self, restaurant_id: UUID) -> None:
        """Delete restaurant; address and dishes follow via cascade."""
        model = await self._get_model(restaurant_id)
        if model is None:
            return
        await self.session.delete(model)
        await self.session.flush()

    async def _get_model(self, restaurant_id: UUID) -> RestaurantModel | None:
        stmt = select(RestaurantModel).where(RestaurantModel.id == restaurant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: RestaurantModel) -> Restaurant:
        return Restaurant(
            id=model.id,
            name=model.name,
            description=model.description,
            category=model.category,
            has_delivery=model.has_delivery,
            contact_email=model.contact_email,
            contact_number=model.contact_number,
            created_by_id=model.created_by_id,
            address=Address(
                city=model.address.city,
                street=model.address.street,
                postal_code=model.address.postal_code,
            ),
            dishes=[
                Dish(
                    id=dish.id,
                    restaurant_id=dish.restaurant_id,
                    name=dish.name,
                    description=dish.description,
                    price=dish.price,
                )
                for dish in model.dishes
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
