"""Database engine, session factory and request-scoped sessions"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from backend.app.core.config import Settings
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models"""


class Database:
    """Owns the async engine and session factory for one application instance"""

    def __init__(self, settings: Settings):
        engine_kwargs = {"echo": settings.DATABASE_ECHO}
        if not settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.DATABASE_POOL_SIZE,
                max_overflow=settings.DATABASE_MAX_OVERFLOW,
                pool_pre_ping=True,
            )

        self.engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create all tables (development and tests; production uses Alembic)"""
        # Import models so every table is registered on Base.metadata
        import backend.app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    async def drop_all(self) -> None:
        import backend.app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the application's database"""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency yielding a request-scoped session.

    Handlers commit explicitly; anything left uncommitted is rolled back.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
