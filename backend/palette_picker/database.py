"""
Palette Picker Backend — Database Session Management
======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine for the environment-selected database URL and
       provides a session dependency that commits on success and rolls back
       on error.
Who:   Route handlers receive sessions via FastAPI's dependency injection;
       services receive them as an explicit `db` argument.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    PostgreSQL URLs get a sized QueuePool (pool_size / max_overflow from
    settings, hourly recycling). SQLite URLs, used by the test suite, keep the
    dialect's default pool, which does not accept sizing arguments.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from palette_picker.config import settings


def engine_options(url: str) -> Dict[str, Any]:
    """Keyword arguments for create_async_engine appropriate to the URL's dialect."""
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL in DEBUG mode only
        "echo": settings.log_level == "DEBUG",
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.resolved_database_url,
    **engine_options(settings.resolved_database_url),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: generated ids stay readable after a write commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, Alembic's autogenerate,
    and the test suite's create_all/drop_all.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits anything left pending
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/projects")
        async def list_projects(db: AsyncSession = Depends(get_db_session)):
            return await project_service.list_projects(db=db)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
