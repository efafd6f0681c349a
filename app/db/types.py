"""
Tipos de columna compartidos por los modelos.
"""
import uuid
from datetime import date

from sqlalchemy import String, TypeDecorator

from app.core.dates import to_iso_date, parse_iso_date


def new_id() -> str:
    """ID opaco asignado por el almacén al crear un documento."""
    return uuid.uuid4().hex


class ISODate(TypeDecorator):
    """
    Fecha de calendario almacenada como texto ``YYYY-MM-DD``.

    En Python siempre es ``datetime.date``; los filtros de rango se comparan
    sobre el texto, que conserva el orden cronológico.
    """
    impl = String(10)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, str):
            value = parse_iso_date(value)
        return to_iso_date(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, date):
            return value
        return parse_iso_date(value)
