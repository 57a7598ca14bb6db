"""
Database connection management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings, to_async_url
from ..dbmodels import Base
from ..errors import DatabaseConnectionError
from ..logging import get_logger

logger = get_logger(__name__)


def describe_connection_error(database_url: str, error: Exception) -> str:
    """Turn a driver error raised while connecting into an actionable message."""
    error_str = str(error)
    error_type = type(error).__name__

    if "unable to open database file" in error_str:
        db_path = database_url.split("///", 1)[-1]
        return (
            f"Cannot open SQLite database file: {error_str}\n"
            f"Check that the directory for '{db_path}' exists and is writable."
        )
    if "Connection refused" in error_str or "could not connect" in error_str:
        return (
            f"Cannot connect to database server: {error_str}\n"
            f"The database server appears to be down or unreachable."
        )
    if "password authentication failed" in error_str:
        return (
            f"Database authentication failed: {error_str}\n"
            f"Please check your database credentials."
        )
    if "does not exist" in error_str:
        db_name = database_url.split("/")[-1].split("?")[0]
        return (
            f"Cannot connect to database: {error_str}\n"
            f"The database '{db_name}' or its role may not exist."
        )
    return f"Database connection error ({error_type}): {error_str}"


class Database:
    """Handle on the async engine and session factory for one application.

    Created unconnected; ``connect`` opens the pool and proves it with a
    round trip, ``dispose`` releases it.
    """

    def __init__(self, database_url: str | None = None, *, echo: bool | None = None):
        self.database_url = database_url or settings.database_url
        self.echo = settings.sql_echo if echo is None else echo
        self._engine: AsyncEngine | None = None
        self._session_local: async_sessionmaker[AsyncSession] | None = None

    @property
    def connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized")
        return self._engine

    def _create_engine(self) -> AsyncEngine:
        async_url = to_async_url(self.database_url)
        if async_url.startswith("sqlite"):
            return create_async_engine(async_url, echo=self.echo)
        return create_async_engine(
            async_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=self.echo,
        )

    async def connect(self) -> None:
        """Create the engine and verify the database answers.

        Raises:
            DatabaseConnectionError: If the database cannot be reached.
        """
        if self._engine is not None:
            return

        engine = self._create_engine()
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            await engine.dispose()
            message = describe_connection_error(self.database_url, e)
            logger.error("Database connection failed", error=message)
            raise DatabaseConnectionError(message) from e

        self._engine = engine
        self._session_local = async_sessionmaker(
            engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database connected", database_url=self.database_url)

    async def create_schema(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_local = None
        logger.info("Database connections closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session from the shared pool."""
        if self._session_local is None:
            raise RuntimeError("Database not initialized")

        async with self._session_local() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
