"""Unit tests for core/time_utils.py (studio-local day and month windows)."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from inkwell.core.time_utils import day_bounds, local_date_bounds, month_bounds, to_utc

MADRID_TZ = ZoneInfo("Europe/Madrid")


class TestDayBounds:

    def test_summer_day_in_madrid(self):
        start, end = day_bounds(datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc), MADRID_TZ)
        assert start == datetime(2024, 5, 14, 22, 0, tzinfo=timezone.utc)
        assert end == datetime(2024, 5, 15, 22, 0, tzinfo=timezone.utc)

    def test_utc_instant_late_at_night_belongs_to_next_local_day(self):
        # 23:30 UTC on 15 May is 01:30 on 16 May in Madrid
        start, _ = day_bounds(datetime(2024, 5, 15, 23, 30, tzinfo=timezone.utc), MADRID_TZ)
        assert start == datetime(2024, 5, 15, 22, 0, tzinfo=timezone.utc)

    def test_naive_value_is_studio_local(self):
        start, _ = day_bounds(datetime(2024, 1, 10, 0, 30), MADRID_TZ)
        assert start == datetime(2024, 1, 9, 23, 0, tzinfo=timezone.utc)

    def test_daylight_saving_day_is_23_hours(self):
        start, end = local_date_bounds(date(2024, 3, 31), MADRID_TZ)
        assert (end - start).total_seconds() == 23 * 3600


class TestMonthBounds:

    def test_may(self):
        start, end = month_bounds(datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc), MADRID_TZ)
        assert start == datetime(2024, 4, 30, 22, 0, tzinfo=timezone.utc)
        assert end == datetime(2024, 5, 31, 22, 0, tzinfo=timezone.utc)

    def test_december_rolls_over_year(self):
        start, end = month_bounds(datetime(2024, 12, 20, tzinfo=timezone.utc), MADRID_TZ)
        assert start == datetime(2024, 11, 30, 23, 0, tzinfo=timezone.utc)
        assert end == datetime(2024, 12, 31, 23, 0, tzinfo=timezone.utc)


class TestToUtc:

    def test_naive_interpreted_in_studio_zone(self):
        assert to_utc(datetime(2024, 7, 1, 10, 0), MADRID_TZ) == datetime(2024, 7, 1, 8, 0, tzinfo=timezone.utc)

    def test_aware_value_only_converted(self):
        value = datetime(2024, 7, 1, 10, 0, tzinfo=timezone.utc)
        assert to_utc(value, MADRID_TZ) == value
