from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from linx.core.config import settings


# ---------------------------------------------------------------------
# Database engine
# ---------------------------------------------------------------------

engine: AsyncEngine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,  # Validates connections before using them
)


# ---------------------------------------------------------------------
# Database session factory
# ---------------------------------------------------------------------

# `expire_on_commit=False` keeps loaded reports usable after commit,
# so routers can serialize them once the service has committed.
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------
# Dependency injection
# ---------------------------------------------------------------------

async def get_db() -> AsyncSession:
    """
    FastAPI dependency that provides an asynchronous database session.

    A new `AsyncSession` is created for each request and closed once the
    request lifecycle ends.
    """
    async with AsyncSessionLocal() as session:
        yield session
