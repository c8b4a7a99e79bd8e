"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 in async mode for the Bookshelf API.

Async Engine
============
Every store operation is awaited by the GraphQL resolvers, so the engine is
created with create_async_engine(). The default URL points at an embedded
SQLite file through the aiosqlite driver; any other async driver URL
(postgresql+asyncpg://..., for example) works the same way.

Unlike a module-level engine, the engine here is built explicitly by the
entity store when the application starts and disposed when it stops.

Session Management Pattern
==========================
The ORM store uses "session per operation":
1. Operation starts → create a new AsyncSession
2. Run the statement, commit on success
3. Close the session when the operation ends
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class:

        class Book(Base):
            __tablename__ = "book"
            ...

    Both store implementations share Base.metadata: the ORM store maps
    rows to model instances, the SQL store issues Core statements against
    the same Table objects.
    """
    pass


# =============================================================================
# Engine and Session Factories
# =============================================================================
def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    An in-memory SQLite database only lives as long as its connection, so
    those URLs get a StaticPool that keeps a single connection open for the
    engine's lifetime.

    Args:
        database_url: Async SQLAlchemy URL
        echo: Log all SQL statements

    Returns:
        AsyncEngine instance
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections are alive before using
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to the engine.

    expire_on_commit=False keeps attribute values readable after commit,
    which is needed because rows are converted to plain records after the
    session has committed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# Utility Functions
# =============================================================================
async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables that don't exist yet.

    The schema is fixed (two tables), so tables are created directly from
    the metadata at startup instead of through migrations.
    """
    # Import models so they are registered on Base.metadata
    from bookshelf import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only used by tests and the seed script's
    --reset option.
    """
    from bookshelf import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
