# backend/inkwell/schemas/dashboard_schema.py
"""
Esquema de respuesta de las métricas del panel principal.
"""

from .base_schema import CamelModel


class DashboardStatsResponse(CamelModel):
    today_appointments: int
    monthly_revenue: float
    active_artists: int
    low_stock_items: int
