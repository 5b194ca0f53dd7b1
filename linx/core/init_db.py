import logging

from linx.core.db import engine
from linx.models import Base

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """
    Create the `sol_reports` table (and any other mapped table) if missing.

    Runs at application startup. `Base.metadata.create_all` is idempotent,
    so restarting the service against an existing database is safe.
    """
    async with engine.begin() as conn:
        # `create_all` is synchronous; run it inside the async connection.
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
