from datetime import date, time
from typing import Optional

from sqlalchemy import JSON, Date, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from linx.models.base import Base


class SolReport(Base):
    """
    REMS daily weather report for one Martian sol.

    Each row mirrors one entry of the Curiosity REMS feed. The sol number
    is the natural key: re-importing a feed updates rows in place.
    """

    __tablename__ = "sol_reports"

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Internal unique identifier for the report",
    )

    sol: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        unique=True,
        index=True,
        comment="Sols elapsed since the Curiosity landing",
    )

    source_id: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="Row identifier as published in the REMS feed",
    )

    terrestrial_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Earth date of the report",
    )

    # ------------------------------------------------------------------
    # Season
    # ------------------------------------------------------------------

    ls: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Solar longitude (degrees)",
    )

    season: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="Martian month, e.g. 'Month 3'",
    )

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------

    min_temp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Minimum air temperature (C)")
    max_temp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Maximum air temperature (C)")
    min_gts_temp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Minimum ground temperature (C)")
    max_gts_temp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Maximum ground temperature (C)")

    pressure: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Atmospheric pressure (Pa)")
    pressure_string: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="Pressure relative to the seasonal average ('Higher'/'Lower')",
    )

    abs_humidity: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    wind_speed: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    wind_direction: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    atmo_opacity: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="Sky condition, e.g. 'Sunny'",
    )

    sunrise: Mapped[Optional[time]] = mapped_column(Time, nullable=True, comment="Local mean solar time")
    sunset: Mapped[Optional[time]] = mapped_column(Time, nullable=True, comment="Local mean solar time")

    local_uv_irradiance_index: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    raw: Mapped[Optional[dict]] = mapped_column(
        JSON,
        nullable=True,
        comment="Feed row as received",
    )
