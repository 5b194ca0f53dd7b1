from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from linx.core.db import get_db
from linx.schemas.weather import WeatherResponse
from linx.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get(
    "",
    response_model=WeatherResponse,
    summary="Mars weather for an Earth date",
    description=(
        "Converts the requested Earth instant to the Curiosity sol and returns the REMS report "
        "stored for that sol.\n\n"
        "`date` accepts:\n"
        "- a date-time with offset: `2026-02-09T21:42:00+01:00`\n"
        "- a UTC date-time: `2026-02-09T20:42:00Z`\n"
        "- a calendar date: `2026-02-09` (00:00 UTC)\n\n"
        "If `date` is omitted, the current instant is used. "
        "`report` is `null` when no report has been imported for the sol."
    ),
)
async def get_weather(
    date: Optional[str] = Query(
        default=None,
        description="ISO-8601 date or date-time",
        examples=["2026-02-09T21:42:00+01:00"],
    ),
    db: AsyncSession = Depends(get_db),
) -> WeatherResponse:
    service = WeatherService(db=db)
    try:
        return await service.weather_for_query(date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
