# backend/inkwell/services/dashboard_service.py
"""
Motor de agregación del panel principal.

Calcula las cuatro métricas del panel para un instante ``as_of``:

- today_appointments: citas con scheduled_date en [inicio del día, inicio del
  día siguiente) en la zona horaria del estudio.
- monthly_revenue: suma de total_amount de las ventas del mes natural que
  contiene ``as_of``.
- active_artists: artistas con is_active = true.
- low_stock_items: artículos con current_stock <= min_level.

Las cuatro consultas son independientes y se ejecutan en paralelo, cada
una en su propia sesión. El resultado no es una instantánea transaccional:
cada métrica refleja el momento en que se ejecutó su consulta.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import async_sessionmaker

from inkwell.core.time_utils import day_bounds, month_bounds
from inkwell.crud import dashboard_crud
from inkwell.services.finance_service import to_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    today_appointments: int
    monthly_revenue: Decimal
    active_artists: int
    low_stock_items: int


class DashboardRepository(Protocol):
    """Consultas que necesita el motor de agregación (límites en UTC, [start, end))."""

    async def count_appointments_between(self, start: datetime, end: datetime) -> int: ...

    async def sum_sales_between(self, start: datetime, end: datetime) -> Decimal: ...

    async def count_active_artists(self) -> int: ...

    async def count_low_stock_items(self) -> int: ...


class SqlDashboardRepository:
    """
    Implementación SQLAlchemy del repositorio del panel.

    Cada consulta abre una sesión propia para poder ejecutarse en paralelo.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def count_appointments_between(self, start: datetime, end: datetime) -> int:
        async with self.session_factory() as db:
            return await dashboard_crud.count_appointments_between(db, start, end)

    async def sum_sales_between(self, start: datetime, end: datetime) -> Decimal:
        async with self.session_factory() as db:
            return await dashboard_crud.sum_sales_between(db, start, end)

    async def count_active_artists(self) -> int:
        async with self.session_factory() as db:
            return await dashboard_crud.count_active_artists(db)

    async def count_low_stock_items(self) -> int:
        async with self.session_factory() as db:
            return await dashboard_crud.count_low_stock_items(db)


async def compute_dashboard_stats(
    repository: DashboardRepository,
    as_of: datetime,
    tz: ZoneInfo,
) -> DashboardStats:
    """
    Calcula las métricas del panel para ``as_of``.

    Args:
        repository: origen de datos del panel
        as_of: instante de referencia; sin tzinfo se interpreta en ``tz``
        tz: zona horaria que define los límites de día y mes
    """
    day_start, day_end = day_bounds(as_of, tz)
    month_start, month_end = month_bounds(as_of, tz)

    today_count, revenue, active_count, low_stock_count = await asyncio.gather(
        repository.count_appointments_between(day_start, day_end),
        repository.sum_sales_between(month_start, month_end),
        repository.count_active_artists(),
        repository.count_low_stock_items(),
    )

    stats = DashboardStats(
        today_appointments=int(today_count),
        monthly_revenue=to_money(revenue or 0),
        active_artists=int(active_count),
        low_stock_items=int(low_stock_count),
    )
    logger.debug(f"Panel calculado para {as_of.isoformat()}: {stats}")
    return stats
