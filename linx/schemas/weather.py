from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SolReportOut(BaseModel):
    """
    Public representation of a stored REMS report.
    """
    model_config = ConfigDict(from_attributes=True)

    sol: int = Field(..., description="Sols elapsed since the Curiosity landing")
    terrestrial_date: date = Field(..., description="Earth date of the report")
    ls: Optional[int] = Field(None, description="Solar longitude (degrees)")
    season: Optional[str] = None
    min_temp: Optional[int] = Field(None, description="Minimum air temperature (C)")
    max_temp: Optional[int] = Field(None, description="Maximum air temperature (C)")
    min_gts_temp: Optional[int] = Field(None, description="Minimum ground temperature (C)")
    max_gts_temp: Optional[int] = Field(None, description="Maximum ground temperature (C)")
    pressure: Optional[int] = Field(None, description="Atmospheric pressure (Pa)")
    pressure_string: Optional[str] = None
    abs_humidity: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    atmo_opacity: Optional[str] = None
    sunrise: Optional[time] = None
    sunset: Optional[time] = None
    local_uv_irradiance_index: Optional[str] = None


class WeatherResponse(BaseModel):
    """
    Response payload for `/weather`.

    `report` is null when nothing has been imported for the computed sol.
    """
    requested_at: datetime = Field(..., description="Requested instant, normalized to UTC")
    sol: int = Field(..., description="Sol matching the requested instant")
    report: Optional[SolReportOut] = None


class SolReportListResponse(BaseModel):
    """
    Paginated list of stored reports, newest sol first.
    """
    items: list[SolReportOut] = Field(default_factory=list)
    total: int
