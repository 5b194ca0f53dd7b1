from datetime import date, datetime, time
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder the REMS feed uses for values that were not measured.
MISSING = "--"

# Matches the width of the text columns in `sol_reports`.
TEXT_MAX_LENGTH = 32


class RemsSol(BaseModel):
    """
    One row of the REMS feed (`soles[]`).

    The feed encodes every value as a string. Numbers that cannot be
    parsed are treated as missing, except `sol`, which is required.
    Dates and times must match the feed formats exactly.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    terrestrial_date: date
    sol: int
    ls: Optional[int] = None
    season: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    min_temp: Optional[int] = None
    max_temp: Optional[int] = None
    pressure: Optional[int] = None
    pressure_string: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    abs_humidity: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    wind_speed: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    wind_direction: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    atmo_opacity: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    sunrise: time
    sunset: time
    local_uv_irradiance_index: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)
    min_gts_temp: Optional[int] = None
    max_gts_temp: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("sol", mode="before")
    @classmethod
    def _required_int(cls, v: Any) -> int:
        if isinstance(v, int):
            return v
        try:
            return int(str(v).strip())
        except ValueError:
            raise ValueError(f"sol must be an integer, got {v!r}") from None

    @field_validator(
        "ls", "min_temp", "max_temp", "pressure", "min_gts_temp", "max_gts_temp",
        mode="before",
    )
    @classmethod
    def _optional_int(cls, v: Any) -> Optional[int]:
        if v is None or isinstance(v, int):
            return v
        try:
            return int(str(v).strip())
        except ValueError:
            return None

    @field_validator(
        "season", "pressure_string", "abs_humidity", "wind_speed",
        "wind_direction", "atmo_opacity", "local_uv_irradiance_index",
        mode="before",
    )
    @classmethod
    def _optional_text(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        return None if v in ("", MISSING) else v

    @field_validator("terrestrial_date", mode="before")
    @classmethod
    def _feed_date(cls, v: Any) -> date:
        if isinstance(v, date):
            return v
        return datetime.strptime(str(v), "%Y-%m-%d").date()

    @field_validator("sunrise", "sunset", mode="before")
    @classmethod
    def _feed_time(cls, v: Any) -> time:
        if isinstance(v, time):
            return v
        return datetime.strptime(str(v), "%H:%M").time()


class RemsFeed(BaseModel):
    """
    Request body for `POST /ingestion/sols`: a REMS feed document.

    Rows are kept loosely typed here so that one malformed row is
    reported by the ingestion service instead of rejecting the whole feed.
    """
    model_config = ConfigDict(extra="ignore")

    soles: List[Any] = Field(
        default_factory=list,
        description="Feed rows, as published by the REMS weather feed.",
        examples=[[{
            "id": "4801",
            "terrestrial_date": "2026-02-09",
            "sol": "4803",
            "ls": "182",
            "season": "Month 7",
            "min_temp": "-75",
            "max_temp": "-5",
            "pressure": "780",
            "pressure_string": "Higher",
            "abs_humidity": "--",
            "wind_speed": "--",
            "wind_direction": "--",
            "atmo_opacity": "Sunny",
            "sunrise": "05:26",
            "sunset": "17:20",
            "local_uv_irradiance_index": "Moderate",
            "min_gts_temp": "-80",
            "max_gts_temp": "8",
        }]],
    )


class IngestionRowError(BaseModel):
    index: int = Field(..., description="Position of the rejected row in `soles`")
    detail: str


class IngestionResponse(BaseModel):
    """
    Response payload for a feed import.
    """

    received: int = Field(..., description="Rows present in the submitted feed")
    upserted: int = Field(..., description="Rows inserted or updated")
    failed: int = Field(..., description="Rows rejected by validation")
    errors: List[IngestionRowError] = Field(default_factory=list)
    latest_sol: Optional[int] = Field(None, description="Highest sol stored after the import")
