from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from linx.core.db import get_db
from linx.schemas.ingestion import IngestionResponse, RemsFeed
from linx.services.ingestion_service import IngestionService

router = APIRouter(prefix="/ingestion", tags=["Ingestion"])


@router.post(
    "/sols",
    response_model=IngestionResponse,
    summary="Import a REMS feed document",
    description=(
        "Stores the rows of a REMS weather feed document (`{\"soles\": [...]}`).\n\n"
        "- Rows are upserted by `sol`, so re-importing a feed is safe.\n"
        "- Malformed rows are reported in `errors` and do not abort the import."
    ),
)
async def ingest_sols(feed: RemsFeed, db: AsyncSession = Depends(get_db)) -> IngestionResponse:
    """
    Feed import endpoint.
    """
    service = IngestionService(db=db)
    return await service.ingest(feed)
