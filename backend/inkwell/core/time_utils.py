# backend/inkwell/core/time_utils.py
"""
Utilidades de fechas para la zona horaria del estudio.

Todas las marcas temporales se persisten en UTC. Los límites de "día" y
"mes" se calculan en la zona horaria configurada (settings.TIMEZONE) y se
convierten a UTC antes de consultar la base de datos.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from inkwell.core.config import settings


def studio_tz(tz_name: Optional[str] = None) -> ZoneInfo:
    return ZoneInfo(tz_name or settings.TIMEZONE)


def ensure_aware(value: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    """Una fecha sin zona se interpreta en la zona del estudio."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz or studio_tz())
    return value


def to_utc(value: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    return ensure_aware(value, tz).astimezone(timezone.utc)


def day_bounds(as_of: datetime, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    """
    Devuelve [inicio del día, inicio del día siguiente) de ``as_of`` en ``tz``,
    ambos en UTC.
    """
    local = ensure_aware(as_of, tz).astimezone(tz)
    return local_date_bounds(local.date(), tz)


def local_date_bounds(day: date, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    # Se construye desde la fecha local para respetar los cambios de horario
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def month_bounds(as_of: datetime, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    """
    Devuelve [día 1 a las 00:00, día 1 del mes siguiente a las 00:00) del mes
    que contiene ``as_of`` en ``tz``, ambos en UTC.
    """
    local = ensure_aware(as_of, tz).astimezone(tz)
    first = date(local.year, local.month, 1)
    if local.month == 12:
        next_first = date(local.year + 1, 1, 1)
    else:
        next_first = date(local.year, local.month + 1, 1)
    start = datetime.combine(first, time.min, tzinfo=tz)
    end = datetime.combine(next_first, time.min, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)
