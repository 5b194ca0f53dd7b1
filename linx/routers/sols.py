from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from linx.core.db import get_db
from linx.repositories.sol_report_repository import SolReportRepository
from linx.schemas.weather import SolReportListResponse, SolReportOut

router = APIRouter(prefix="/sols", tags=["Sols"])


@router.get(
    "",
    response_model=SolReportListResponse,
    summary="List stored sol reports",
    description="Returns imported REMS reports, newest sol first.",
)
async def list_sols(
    limit: int = Query(default=100, ge=1, le=5000),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
) -> SolReportListResponse:
    repo = SolReportRepository(db)
    items, total = await repo.list_reports(limit=limit, offset=offset)

    return SolReportListResponse(
        items=[SolReportOut.model_validate(x) for x in items],
        total=total,
    )


@router.get(
    "/{sol}",
    response_model=SolReportOut,
    summary="Get the report for one sol",
)
async def get_sol(
    sol: int = Path(..., ge=0, description="Sols elapsed since the Curiosity landing"),
    db: AsyncSession = Depends(get_db),
) -> SolReportOut:
    report = await SolReportRepository(db).get_by_sol(sol)
    if report is None:
        raise HTTPException(status_code=404, detail="Sol report not found")
    return SolReportOut.model_validate(report)
