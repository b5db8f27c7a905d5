# backend/inkwell/api/v1/endpoints/dashboard.py
"""
Endpoint de métricas del panel principal.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import async_sessionmaker

from inkwell.api import deps
from inkwell.core.config import Settings
from inkwell.core.exceptions import UnexpectedError
from inkwell.core.time_utils import studio_tz
from inkwell.schemas.dashboard_schema import DashboardStatsResponse
from inkwell.services.dashboard_service import SqlDashboardRepository, compute_dashboard_stats

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
async def read_dashboard_stats(
    as_of: Optional[datetime] = Query(default=None, alias="asOf"),
    session_factory: async_sessionmaker = Depends(deps.get_session_factory),
    config: Settings = Depends(deps.get_settings),
) -> DashboardStatsResponse:
    """
    Citas de hoy, ingresos del mes, artistas activos y artículos con stock bajo.

    ``asOf`` permite consultar otro instante; por defecto, ahora.
    """
    moment = as_of or datetime.now(timezone.utc)
    repository = SqlDashboardRepository(session_factory)
    try:
        stats = await asyncio.wait_for(
            compute_dashboard_stats(repository, moment, studio_tz(config.TIMEZONE)),
            timeout=config.DASHBOARD_TIMEOUT,
        )
    except asyncio.TimeoutError:
        logger.error(f"Timeout calculando el panel ({config.DASHBOARD_TIMEOUT}s)")
        raise UnexpectedError("Dashboard statistics timed out")

    return DashboardStatsResponse(
        today_appointments=stats.today_appointments,
        monthly_revenue=float(stats.monthly_revenue),
        active_artists=stats.active_artists,
        low_stock_items=stats.low_stock_items,
    )
