from datetime import date, time

import pytest
from pydantic import ValidationError

from linx.schemas.ingestion import RemsSol


def test_feed_row_is_typed(make_rems_row):
    row = RemsSol.model_validate(make_rems_row(4803, "2026-02-09"))

    assert row.sol == 4803
    assert row.id == "4801"
    assert row.terrestrial_date == date(2026, 2, 9)
    assert row.min_temp == -75
    assert row.max_gts_temp == 8
    assert row.sunrise == time(5, 26)
    assert row.sunset == time(17, 20)
    assert row.atmo_opacity == "Sunny"


def test_missing_markers_become_none(make_rems_row):
    row = RemsSol.model_validate(
        make_rems_row(4803, "2026-02-09", pressure="--", min_temp="n/a", atmo_opacity="--", season="")
    )

    assert row.pressure is None
    assert row.min_temp is None
    assert row.atmo_opacity is None
    assert row.season is None
    assert row.wind_speed is None


def test_sol_is_required(make_rems_row):
    with pytest.raises(ValidationError):
        RemsSol.model_validate(make_rems_row(4803, "2026-02-09", sol="--"))


@pytest.mark.parametrize(
    "field, value",
    [
        ("terrestrial_date", "09/02/2026"),
        ("terrestrial_date", "2026-02-09T00:00:00"),
        ("sunrise", "5h26"),
        ("sunset", "17:20:00"),
    ],
)
def test_strict_date_and_time_formats(field, value, make_rems_row):
    with pytest.raises(ValidationError):
        RemsSol.model_validate(make_rems_row(4803, "2026-02-09", **{field: value}))


def test_text_longer_than_column_is_rejected(make_rems_row):
    with pytest.raises(ValidationError):
        RemsSol.model_validate(make_rems_row(4803, "2026-02-09", atmo_opacity="x" * 40))
