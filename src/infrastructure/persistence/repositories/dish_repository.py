"""DishRepository - SQLAlchemy implementation of DishRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dish import Dish
from src.infrastructure.persistence.models.dish import Dish as DishModel


class DishRepository:
    """SQLAlchemy implementation of DishRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, dish_id: UUID) -> Dish | None:
        stmt = select(DishModel).where(DishModel.id == dish_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_restaurant_id(self, restaurant_id: UUID) -> list[Dish]:
        stmt = (
            select(DishModel)
            .where(DishModel.restaurant_id == restaurant_id)
            .order_by(DishModel.name, DishModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, dish: Dish) -> None:
        model = DishModel(
            id=dish.id,
            restaurant_id=dish.restaurant_id,
            name=dish.name,
            description=dish.description,
            price=dish.price,
        )
        self.session.add(model)
        await self.session.flush()

    async def delete_by_restaurant_id(self, restaurant_id: UUID) -> int:
        """Bulk-delete every dish of a restaurant.

        Returns:
            Number of rows removed.
        """
        stmt = delete(DishModel).where(DishModel.restaurant_id == restaurant_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    def _to_domain(self, model: DishModel) -> Dish:
        return Dish(
            id=model.id,
            restaurant_id=model.restaurant_id,
            name=model.name,
            description=model.description,
            price=model.price,
        )
