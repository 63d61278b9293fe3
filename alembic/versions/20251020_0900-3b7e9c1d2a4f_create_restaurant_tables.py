"""create_restaurant_tables

Revision ID: 3b7e9c1d2a4f
Revises:
Create Date: 2025-10-20 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7e9c1d2a4f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create users, restaurants, addresses and dishes tables."""
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "role",
            sa.String(length=20),
            server_default="User",
            nullable=False,
            comment="Role claim (User, Manager, Admin)",
        ),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("nationality", sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "restaurants",
        *_timestamps(),
        sa.Column("name", sa.String(length=25), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column(
            "has_delivery", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("contact_email", sa.String(length=255), nullable=True),
        sa.Column("contact_number", sa.String(length=50), nullable=True),
        sa.Column(
            "created_by_id",
            sa.Uuid(),
            nullable=True,
            comment="User who created the restaurant (ownership checks)",
        ),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_restaurants_name"), "restaurants", ["name"])
    op.create_index(op.f("ix_restaurants_category"), "restaurants", ["category"])
    op.create_index(
        op.f("ix_restaurants_created_by_id"), "restaurants", ["created_by_id"]
    )

    op.create_table(
        "addresses",
        *_timestamps(),
        sa.Column("restaurant_id", sa.Uuid(), nullable=False),
        sa.Column("city", sa.String(length=50), nullable=False),
        sa.Column("street", sa.String(length=50), nullable=False),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
        sa.ForeignKeyConstraint(
            ["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("restaurant_id"),
    )

    op.create_table(
        "dishes",
        *_timestamps(),
        sa.Column("restaurant_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.ForeignKeyConstraint(
            ["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_dishes_restaurant_id"), "dishes", ["restaurant_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index(op.f("ix_dishes_restaurant_id"), table_name="dishes")
    op.drop_table("dishes")
    op.drop_table("addresses")
    op.drop_index(op.f("ix_restaurants_created_by_id"), table_name="restaurants")
    op.drop_index(op.f("ix_restaurants_category"), table_name="restaurants")
    op.drop_index(op.f("ix_restaurants_name"), table_name="restaurants")
    op.drop_table("restaurants")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
