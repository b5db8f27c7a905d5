"""Unit tests for the dashboard aggregation engine with an in-memory repository."""

from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from inkwell.services.dashboard_service import compute_dashboard_stats

MADRID_TZ = ZoneInfo("Europe/Madrid")


class FakeDashboardRepository:
    """Applies the same half-open windows as the SQL implementation."""

    def __init__(self, appointments=(), sales=(), artists=(), items=()):
        self.appointments = list(appointments)
        self.sales = list(sales)
        self.artists = list(artists)
        self.items = list(items)

    async def count_appointments_between(self, start, end):
        return sum(1 for scheduled in self.appointments if start <= scheduled < end)

    async def sum_sales_between(self, start, end):
        return sum((amount for sold_at, amount in self.sales if start <= sold_at < end), Decimal("0"))

    async def count_active_artists(self):
        return sum(1 for active in self.artists if active)

    async def count_low_stock_items(self):
        return sum(1 for current, minimum in self.items if current <= minimum)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestComputeDashboardStats:

    async def test_empty_studio(self):
        stats = await compute_dashboard_stats(FakeDashboardRepository(), utc(2024, 5, 15, 12), MADRID_TZ)

        assert stats.today_appointments == 0
        assert stats.monthly_revenue == Decimal("0.00")
        assert stats.active_artists == 0
        assert stats.low_stock_items == 0

    async def test_monthly_revenue_sums_current_month_only(self):
        repository = FakeDashboardRepository(
            sales=[
                (utc(2024, 5, 2, 10), Decimal("100.00")),
                (utc(2024, 5, 20, 10), Decimal("250.50")),
                (utc(2024, 4, 30, 10), Decimal("999.00")),
            ]
        )

        stats = await compute_dashboard_stats(repository, utc(2024, 5, 15, 12), MADRID_TZ)

        assert stats.monthly_revenue == Decimal("350.50")

    async def test_today_uses_studio_day_boundaries(self):
        repository = FakeDashboardRepository(
            appointments=[
                utc(2024, 5, 14, 22, 0),   # 00:00 in Madrid, included
                utc(2024, 5, 15, 21, 59),  # 23:59 in Madrid, included
                utc(2024, 5, 15, 22, 0),   # next local day
                utc(2024, 5, 14, 21, 59),  # previous local day
            ]
        )

        stats = await compute_dashboard_stats(repository, utc(2024, 5, 15, 12), MADRID_TZ)

        assert stats.today_appointments == 2

    async def test_counts_active_artists_and_low_stock(self):
        repository = FakeDashboardRepository(
            artists=[True, True, False],
            items=[(3, 5), (0, 5), (10, 5)],
        )

        stats = await compute_dashboard_stats(repository, utc(2024, 5, 15, 12), MADRID_TZ)

        assert stats.active_artists == 2
        assert stats.low_stock_items == 2
