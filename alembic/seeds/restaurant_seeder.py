"""Restaurant seeder for demo data.

Seeds two system-created restaurants (no creator) with their addresses and
dishes. Idempotent: does nothing once any restaurant exists.
"""

from decimal import Decimal

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

logger = structlog.get_logger(__name__)

DEFAULT_RESTAURANTS = [
    {
        "name": "KFC",
        "category": "Fast Food",
        "description": "KFC (short for Kentucky Fried Chicken) is an American "
        "fast food restaurant chain specializing in fried chicken.",
        "contact_email": "contact@kfc.com",
        "has_delivery": True,
        "address": {"city": "Kraków", "street": "Długa 5", "postal_code": "30-001"},
        "dishes": [
            {"name": "Nashville Hot Chicken", "price": Decimal("10.30")},
            {"name": "Chicken Nuggets", "price": Decimal("5.30")},
        ],
    },
    {
        "name": "McDonald Szewska",
        "category": "Fast Food",
        "description": "McDonald's Corporation, incorporated on December 21, "
        "1964, operates and franchises McDonald's restaurants.",
        "contact_email": "contact@mcdonald.com",
        "has_delivery": True,
        "address": {"city": "Kraków", "street": "Szewska 2", "postal_code": "30-001"},
        "dishes": [],
    },
]


async def seed_restaurants(session: AsyncSession) -> None:
    """Seed demo restaurants when the table is empty.

    Args:
        session: Async database session.
    """
    result = await session.execute(text("SELECT 1 FROM restaurants LIMIT 1"))
    if result.fetchone() is not None:
        logger.debug("restaurants_exist")
        return

    for data in DEFAULT_RESTAURANTS:
        restaurant_id = uuid7()
        await session.execute(
            text("""
                INSERT INTO restaurants (
                    id, name, description, category, has_delivery,
                    contact_email, created_at, updated_at
                )
                VALUES (
                    :id, :name, :description, :category, :has_delivery,
                    :contact_email, NOW(), NOW()
                )
            """),
            {
                "id": restaurant_id,
                "name": data["name"],
                "description": data["description"],
                "category": data["category"],
                "has_delivery": data["has_delivery"],
                "contact_email": data["contact_email"],
            },
        )
        await session.execute(
            text("""
                INSERT INTO addresses (
                    id, restaurant_id, city, street, postal_code,
                    created_at, updated_at
                )
                VALUES (:id, :restaurant_id, :city, :street, :postal_code, NOW(), NOW())
            """),
            {"id": uuid7(), "restaurant_id": restaurant_id, **data["address"]},
        )
        for dish in data["dishes"]:
            await session.execute(
                text("""
                    INSERT INTO dishes (
                        id, restaurant_id, name, price, created_at, updated_at
                    )
                    VALUES (:id, :restaurant_id, :name, :price, NOW(), NOW())
                """),
                {"id": uuid7(), "restaurant_id": restaurant_id, **dish},
            )
        logger.info("restaurant_seeded", name=data["name"], id=str(restaurant_id))

    logger.info("restaurant_seeding_complete", total=len(DEFAULT_RESTAURANTS))
