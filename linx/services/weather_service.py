from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from linx.core.mars import parse_query_date, sols_since_landing
from linx.repositories.sol_report_repository import SolReportRepository
from linx.schemas.weather import SolReportOut, WeatherResponse

logger = logging.getLogger(__name__)


class WeatherService:
    """
    Resolves an Earth date to the Mars weather report of the matching sol.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.report_repo = SolReportRepository(db)

    async def weather_at(self, moment: datetime) -> WeatherResponse:
        """
        Look up the report for the sol containing `moment`.

        Raises:
            ValueError: if `moment` precedes the Curiosity landing.
        """
        sol = sols_since_landing(moment)
        report = await self.report_repo.get_by_sol(sol)
        if report is None:
            logger.debug("No report stored for sol %d", sol)

        return WeatherResponse(
            requested_at=moment,
            sol=sol,
            report=SolReportOut.model_validate(report) if report else None,
        )

    async def weather_for_query(self, raw_date: Optional[str]) -> WeatherResponse:
        """
        Parse the raw `date` query value and look up its report.

        Raises:
            ValueError: for unparseable dates or dates before the landing.
        """
        return await self.weather_at(parse_query_date(raw_date))
