"""Async engine and unit-of-work sessions.

One session is one request: the container's ``get_db_session`` dependency
opens it, the restaurant, dish and user repositories share it, and it is
committed when the handler returns or rolled back when anything raises.
Concurrent edits are left to the database's transaction isolation.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Owns the connection pool and hands out unit-of-work sessions.

    Usage:
        db = Database("postgresql+asyncpg://restaurant:secret@db/restaurants")

        async with db.get_session() as session:
            repo = RestaurantRepository(session=session)
            await repo.save(restaurant)
        # committed here
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
        )
        # Entities are mapped out of the models before commit; nothing is
        # read from an instance after the session ends.
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on success and rolls back on error."""
        async with self._sessions() as session, session.begin():
            yield session

    async def close(self) -> None:
        """Dispose of the pool (application shutdown)."""
        await self.engine.dispose()
