from typing import Any, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from linx.models.sol_report import SolReport


class SolReportRepository:
    """
    Repository for REMS sol report persistence.

    Wraps every SQLAlchemy query on `SolReport` so services and routers
    never build statements themselves.
    """

    def __init__(self, db: AsyncSession):
        """
        Args:
            db: Asynchronous SQLAlchemy session.
        """
        self.db = db

    async def get_by_sol(self, sol: int) -> Optional[SolReport]:
        """
        Return the report stored for `sol`, or None.
        """
        stmt = select(SolReport).where(SolReport.sol == sol)
        res = await self.db.execute(stmt)
        return res.scalar_one_or_none()

    async def upsert_report(self, sol: int, **fields: Any) -> SolReport:
        """
        Insert or update the report for `sol`.

        Existing rows are updated in place so that importing the same feed
        twice leaves one row per sol. Changes are flushed, not committed;
        the caller owns the transaction.

        Args:
            sol: Natural key of the report.
            **fields: Column values (`terrestrial_date`, `min_temp`, `raw`, ...).

        Returns:
            The existing or newly created `SolReport`.
        """
        report = await self.get_by_sol(sol)
        if report is None:
            report = SolReport(sol=sol, **fields)
            self.db.add(report)
        else:
            for name, value in fields.items():
                setattr(report, name, value)

        await self.db.flush()
        return report

    async def list_reports(self, limit: int = 100, offset: int = 0) -> Tuple[List[SolReport], int]:
        """
        List reports newest sol first, with the total row count.
        """
        stmt = select(SolReport).order_by(SolReport.sol.desc()).limit(limit).offset(offset)
        items = list((await self.db.execute(stmt)).scalars().all())

        total = (await self.db.execute(select(func.count(SolReport.id)))).scalar_one()
        return items, int(total)

    async def get_latest_sol(self) -> Optional[int]:
        """
        Returns the highest sol stored, or None if the table is empty.
        """
        res = await self.db.execute(select(func.max(SolReport.sol)))
        return res.scalar_one()
