"""
Database connection management.

A single relational store (SQLite via aiosqlite, or PostgreSQL via asyncpg)
holds users, user details and access tokens.
"""

from typing import AsyncGenerator, Optional
import logging
from contextlib import asynccontextmanager

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from accounts.common.config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Owns the async engine and session factory.

    Usage:
        await db_manager.initialize()
        await db_manager.create_tables()
        async with db_manager.session() as session:
            result = await session.execute(stmt)
    """

    def __init__(self):
        self.available = False
        self.database_url: Optional[str] = None
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return bool(self.database_url) and self.database_url.startswith("sqlite")

    async def initialize(self, database_url: Optional[str] = None):
        """Create the engine and verify the database answers"""
        self.database_url = database_url or settings.database_url
        self.available = await self._init_engine()
        if not self.available:
            db_type = "SQLite" if self.is_sqlite else "PostgreSQL"
            raise RuntimeError(
                f"{db_type} is not available. This is a critical dependency. "
                f"Check your configuration and database setup."
            )

    async def _init_engine(self) -> bool:
        db_type = "SQLite" if self.is_sqlite else "PostgreSQL"
        try:
            engine_kwargs = {
                "echo": settings.debug,
            }
            if not self.is_sqlite:
                engine_kwargs.update({
                    "pool_size": 10,
                    "max_overflow": 20,
                    "pool_pre_ping": True,
                })

            self.engine = create_async_engine(self.database_url, **engine_kwargs)
            if self.is_sqlite:
                event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

            self.session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False
            )

            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))

            logger.info(f"✓ {db_type} connection established")
            return True
        except Exception as e:
            logger.error(f"✗ {db_type} connection failed: {e}")
            return False

    async def create_tables(self):
        """Create the schema (PostgreSQL) and every registered table"""
        from accounts.common.base import Base
        # Register models on Base.metadata
        from accounts.domains.user import models as user_models  # noqa: F401
        from accounts.domains.auth import models as auth_models  # noqa: F401

        if self.engine is None:
            raise RuntimeError("Database is not initialized")

        async with self.engine.begin() as conn:
            if not self.is_sqlite:
                await conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{settings.db_schema}"'))
            await conn.run_sync(Base.metadata.create_all)

        logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables.keys()))}")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a session; uncommitted work is rolled back on error.

        Usage:
            async with db_manager.session() as session:
                result = await session.execute(stmt)
        """
        if not self.available or self.session_factory is None:
            raise RuntimeError("Database is not available")

        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self):
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database engine disposed")
        self.available = False
        self.engine = None
        self.session_factory = None


# Global database manager instance
db_manager = DatabaseManager()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request"""
    async with db_manager.session() as session:
        yield session
