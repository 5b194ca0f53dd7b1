from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from linx.core.config import settings
from linx.core.db import get_db

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    summary="Service health check",
    description=(
        "Checks whether the API service is running and returns basic service information. "
        "This endpoint **does not** verify database connectivity."
    ),
    response_description="Service status",
)
def health():
    """
    **Returns:**
    - `status`: always `ok` while the process serves requests
    - `service`: service name (`APP_NAME`)
    - `environment`: current environment (`ENVIRONMENT`)
    """
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@router.get(
    "/health/db",
    summary="Database health check",
    description=(
        "Runs `SELECT 1` against the report store (SQLite or PostgreSQL, selected by "
        "`DATABASE_URL`). A failure here usually means the database is unreachable or "
        "`DATABASE_URL` is wrong."
    ),
    response_description="Database connection status",
)
async def health_db(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return {"status": "ok", "db": "ok"}
