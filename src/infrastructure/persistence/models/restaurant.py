"""Restaurant and address database models.

A restaurant row owns exactly one address row and any number of dish rows.
Both are removed with the restaurant (ORM cascade plus ``ON DELETE CASCADE``).
"""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.core.constants import (
    ADDRESS_FIELD_MAX_LENGTH,
    CONTACT_EMAIL_MAX_LENGTH,
    CONTACT_NUMBER_MAX_LENGTH,
    POSTAL_CODE_MAX_LENGTH,
    RESTAURANT_CATEGORY_MAX_LENGTH,
    RESTAURANT_NAME_MAX_LENGTH,
)
from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.dish import Dish


class Restaurant(BaseMutableModel):
    """Restaurant model.

    Fields:
        name: Display name (indexed, searched case-insensitively)
        description: Optional description
        category: Cuisine category (indexed, searched case-insensitively)
        has_delivery: Delivery flag
        contact_email: Optional contact email
        contact_number: Optional contact number
        created_by_id: Creating user (nullable, SET NULL when user removed)

    Relationships:
        - address: One-to-one (cascade delete, eager selectin load)
        - dishes: One-to-many (cascade delete, eager selectin load)
    """

    __tablename__ = "restaurants"

    name: Mapped[str] = mapped_column(
        String(RESTAURANT_NAME_MAX_LENGTH), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        String(RESTAURANT_CATEGORY_MAX_LENGTH), nullable=False, index=True
    )
    has_delivery: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    contact_email: Mapped[str | None] = mapped_column(
        String(CONTACT_EMAIL_MAX_LENGTH), nullable=True
    )
    contact_number: Mapped[str | None] = mapped_column(
        String(CONTACT_NUMBER_MAX_LENGTH), nullable=True
    )

    created_by_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="User who created the restaurant (ownership checks)",
    )

    address: Mapped["Address"] = relationship(
        back_populates="restaurant",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    dishes: Mapped[list["Dish"]] = relationship(
        back_populates="restaurant",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Dish.name",
    )


class Address(BaseMutableModel):
    """Address model, owned 1:1 by a restaurant."""

    __tablename__ = "addresses"

    restaurant_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    city: Mapped[str] = mapped_column(String(ADDRESS_FIELD_MAX_LENGTH), nullable=False)
    street: Mapped[str] = mapped_column(String(ADDRESS_FIELD_MAX_LENGTH), nullable=False)
    postal_code: Mapped[str | None] = mapped_column(
        String(POSTAL_CODE_MAX_LENGTH), nullable=True
    )

    restaurant: Mapped[Restaurant] = relationship(back_populates="address")
