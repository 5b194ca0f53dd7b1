from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from linx.repositories.sol_report_repository import SolReportRepository
from linx.schemas.ingestion import IngestionResponse, IngestionRowError, RemsFeed, RemsSol

logger = logging.getLogger(__name__)


class IngestionService:
    """
    Imports REMS feed documents into the sol report store.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.report_repo = SolReportRepository(db)

    @staticmethod
    def _error_detail(exc: ValidationError) -> str:
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'row'}: {err['msg']}"
            for err in exc.errors()
        )

    async def ingest(self, feed: RemsFeed) -> IngestionResponse:
        """
        Validate and upsert every row of `feed`.

        Rows are handled independently: a malformed row is recorded in
        `errors` and skipped, the remaining rows are still imported. All
        accepted rows are committed together at the end.
        """
        upserted = 0
        errors: List[IngestionRowError] = []

        for index, item in enumerate(feed.soles):
            try:
                row = RemsSol.model_validate(item)
            except ValidationError as e:
                detail = self._error_detail(e)
                logger.warning("Rejected REMS row %d: %s", index, detail)
                errors.append(IngestionRowError(index=index, detail=detail))
                continue

            fields: Dict[str, Any] = row.model_dump(exclude={"id", "sol"})
            await self.report_repo.upsert_report(
                row.sol,
                source_id=row.id,
                raw=item,
                **fields,
            )
            upserted += 1

        await self.db.commit()
        latest_sol = await self.report_repo.get_latest_sol()

        logger.info(
            "REMS import: %d received, %d upserted, %d failed (latest sol %s)",
            len(feed.soles), upserted, len(errors), latest_sol,
        )
        return IngestionResponse(
            received=len(feed.soles),
            upserted=upserted,
            failed=len(errors),
            errors=errors,
            latest_sol=latest_sol,
        )
