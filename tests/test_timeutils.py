from datetime import date

import pytest

from courtbook.core.exceptions import InvalidInputError
from courtbook.core.timeutils import facility_today, parse_date, validate_wall_clock, weekday_index


class TestParseDate:
    def test_plain_iso_date(self):
        assert parse_date("2025-06-09") == date(2025, 6, 9)

    def test_iso_datetime_uses_date_part(self):
        assert parse_date("2025-06-09T00:00:00.000Z") == date(2025, 6, 9)
        assert parse_date("2025-06-09T18:30:00+02:00") == date(2025, 6, 9)

    def test_date_passes_through(self):
        assert parse_date(date(2025, 6, 9)) == date(2025, 6, 9)

    @pytest.mark.parametrize(
        "value",
        ["not-a-date", "2025-13-01", "2025-02-30", "09/06/2025", "20250609", "2025-W24-1"],
    )
    def test_malformed_dates_rejected(self, value):
        with pytest.raises(InvalidInputError):
            parse_date(value)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_date_rejected(self, value):
        with pytest.raises(InvalidInputError, match="required"):
            parse_date(value)


def test_weekday_index_counts_from_sunday():
    assert weekday_index(date(2025, 6, 8)) == 0  # Sunday
    assert weekday_index(date(2025, 6, 9)) == 1  # Monday
    assert weekday_index(date(2025, 6, 14)) == 6  # Saturday


def test_facility_today_is_a_date():
    assert isinstance(facility_today("Europe/Berlin"), date)


@pytest.mark.parametrize("value", ["06:00", "23:59", "00:00"])
def test_wall_clock_accepts_hh_mm(value):
    assert validate_wall_clock(value) == value


@pytest.mark.parametrize("value", ["6:00", "24:00", "12:60", "noon", ""])
def test_wall_clock_rejects_other_formats(value):
    with pytest.raises(InvalidInputError):
        validate_wall_clock(value)
