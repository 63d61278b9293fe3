"""Dish database model."""

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.core.constants import DISH_NAME_MAX_LENGTH
from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.restaurant import Restaurant


class Dish(BaseMutableModel):
    """Dish model.

    Fields:
        restaurant_id: Owning restaurant (indexed, CASCADE on delete)
        name: Dish name
        description: Optional description
        price: Non-negative price, two decimal places
    """

    __tablename__ = "dishes"

    restaurant_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(DISH_NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    restaurant: Mapped["Restaurant"] = relationship(back_populates="dishes")
