"""
Earth-to-Mars time conversion.

Curiosity (MSL) counts sols from its landing in Gale crater. Every REMS
daily report is keyed by that sol number, so any Earth instant can be
mapped onto a report once it is converted here.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from typing import Optional

# 2012-08-06 05:17:00 UTC
CURIOSITY_LANDING_TS = 1344230220
CURIOSITY_LANDING = datetime.fromtimestamp(CURIOSITY_LANDING_TS, tz=timezone.utc)

# Mean length of a Martian solar day, in SI seconds.
SOL_SECONDS = 88775.245


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC; naive values are taken as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def sols_since_landing(moment: datetime) -> int:
    """
    Number of Martian sols elapsed since the Curiosity landing.

    Computed as ceil((t - landing) / 88775.245) over whole Unix seconds,
    which matches the sol numbering used in the REMS feed.

    Raises:
        ValueError: if `moment` precedes the landing.
    """
    ts = math.floor(to_utc(moment).timestamp())
    if ts < CURIOSITY_LANDING_TS:
        raise ValueError(
            f"{to_utc(moment).isoformat()} precedes the Curiosity landing "
            f"({CURIOSITY_LANDING.isoformat()})"
        )
    return math.ceil((ts - CURIOSITY_LANDING_TS) / SOL_SECONDS)


def parse_query_date(raw: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    Parse the `date` query parameter into an aware UTC datetime.

    Accepted forms:
    - date-time with offset: `2026-02-09T21:42:00+01:00`
    - date-time in UTC:      `2026-02-09T20:42:00Z`
    - bare date:             `2026-02-09` (00:00 UTC)
    - missing/blank:         `now` (defaults to the current instant)

    Raises:
        ValueError: if the value is not an ISO-8601 date or date-time.
    """
    if raw is None or not raw.strip():
        return to_utc(now or datetime.now(timezone.utc))

    value = raw.strip()
    # A literal `+` in a query string decodes to a space.
    if " " in value and "T" in value:
        value = value.replace(" ", "+")
    if value[-1] in ("Z", "z"):
        value = value[:-1] + "+00:00"

    if not any(sep in value for sep in ("T", "t", " ")):
        try:
            day = date.fromisoformat(value)
        except ValueError:
            raise ValueError(f"Invalid date {raw!r}: expected YYYY-MM-DD or an ISO-8601 date-time") from None
        return datetime.combine(day, time.min, tzinfo=timezone.utc)

    try:
        return to_utc(datetime.fromisoformat(value))
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid date {raw!r}: expected YYYY-MM-DD or an ISO-8601 date-time") from None
