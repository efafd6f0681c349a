"""
Utilidades de calendario para reportes mensuales y renovación de membresías.

Todas las fechas se manejan como ``datetime.date`` dentro del sistema; solo se
serializan a texto ``YYYY-MM-DD`` en el límite con la base de datos.
"""
import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple

import pytz


def to_iso_date(value: date) -> str:
    """
    Serializa una fecha al formato ``YYYY-MM-DD`` con ceros a la izquierda.

    El orden lexicográfico de este formato coincide con el orden cronológico,
    por eso los filtros de rango pueden ejecutarse sobre la columna de texto.
    """
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_iso_date(value: str) -> date:
    return date.fromisoformat(value)


def month_date_range(year: int, month: int) -> Tuple[date, date]:
    """
    Devuelve el rango inclusivo [primer día, último día] de un mes.

    Args:
        year: Año
        month: Mes (1-12)

    Raises:
        ValueError: Si el mes está fuera de rango
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes inválido: {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """Mes anterior a (year, month); enero retrocede a diciembre del año anterior."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def add_months(start: date, months: int) -> date:
    """
    Suma meses de calendario manteniendo el día dentro del rango válido.

    El día se limita al último día del mes destino
    (ej. 2024-01-31 + 1 mes => 2024-02-29).
    """
    total = start.month - 1 + months
    year = start.year + total // 12
    month = total % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def get_current_time_in_gym_timezone(gym_timezone: str) -> datetime:
    """
    Obtiene la hora actual en la zona horaria del gimnasio.

    Args:
        gym_timezone: Zona horaria del gimnasio (ej: 'America/Sao_Paulo')

    Returns:
        Datetime aware representando la hora actual en la zona horaria del gimnasio
    """
    utc_now = datetime.now(timezone.utc)
    tz = pytz.timezone(gym_timezone)
    return utc_now.astimezone(tz)


def gym_today(gym_timezone: str) -> date:
    return get_current_time_in_gym_timezone(gym_timezone).date()


def start_of_month_in_gym_timezone(year: int, month: int, gym_timezone: str) -> datetime:
    """
    Medianoche local del día 1 del mes en la zona del gimnasio, expresada en UTC.

    Las marcas de tiempo de registro se comparan en UTC.
    """
    tz = pytz.timezone(gym_timezone)
    return tz.localize(datetime(year, month, 1)).astimezone(timezone.utc)


def day_window(start: date, days: int) -> Tuple[date, date]:
    """Rango inclusivo [start, start + days]."""
    return start, start + timedelta(days=days)


def resolve_today(today: Optional[date], gym_timezone: str) -> date:
    return today if today is not None else gym_today(gym_timezone)
