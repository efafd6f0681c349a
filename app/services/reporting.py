"""
ReportingService - Agregaciones mensuales de pagos, check-ins y socios.

Los rangos de mes se calculan con fechas reales y se comparan contra la
columna ``YYYY-MM-DD`` del almacén, cuyo orden de texto es el cronológico.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.dates import month_date_range, previous_month, resolve_today, start_of_month_in_gym_timezone
from app.models.checkin import CheckIn
from app.repositories.checkin import check_in_repository
from app.repositories.member import member_repository
from app.repositories.payment import payment_repository

logger = logging.getLogger(__name__)


class ReportingService:
    """
    Servicio de reportes mensuales para el panel del gimnasio.

    Métodos principales:
    - payments_in_month() - Total cobrado en un mes
    - check_ins_in_month() - Check-ins de un mes
    - members_until_end_of_last_month() - Socios registrados hasta el mes anterior

    Las variantes *_this_month / *_last_month derivan (año, mes) de la fecha
    actual en la zona horaria del gimnasio, o de `today` si se proporciona.
    """

    def _today(self, today: Optional[date]) -> date:
        return resolve_today(today, get_settings().GYM_TIMEZONE)

    def current_month(self, today: Optional[date] = None) -> Tuple[int, int]:
        today = self._today(today)
        return today.year, today.month

    def last_month(self, today: Optional[date] = None) -> Tuple[int, int]:
        year, month = self.current_month(today)
        return previous_month(year, month)

    async def payments_in_month(self, db: AsyncSession, year: int, month: int) -> Decimal:
        """
        Suma de los importes de los pagos con fecha dentro del mes.

        Args:
            db: Sesión async de base de datos
            year: Año
            month: Mes (1-12)

        Returns:
            Total del mes; 0 si no hay pagos
        """
        start, end = month_date_range(year, month)
        total = await payment_repository.sum_amount_between(db, start, end)
        logger.debug(f"Pagos {year}-{month:02d} ({start} a {end}): {total}")
        return total

    async def check_ins_in_month(self, db: AsyncSession, year: int, month: int) -> List[CheckIn]:
        """Todos los check-ins con fecha dentro del mes, incluidos el primer y el último día."""
        start, end = month_date_range(year, month)
        return await check_in_repository.get_between(db, start, end)

    async def payments_this_month(self, db: AsyncSession, today: Optional[date] = None) -> Decimal:
        return await self.payments_in_month(db, *self.current_month(today))

    async def payments_last_month(self, db: AsyncSession, today: Optional[date] = None) -> Decimal:
        return await self.payments_in_month(db, *self.last_month(today))

    async def check_ins_this_month(self, db: AsyncSession, today: Optional[date] = None) -> List[CheckIn]:
        return await self.check_ins_in_month(db, *self.current_month(today))

    async def check_ins_last_month(self, db: AsyncSession, today: Optional[date] = None) -> List[CheckIn]:
        return await self.check_ins_in_month(db, *self.last_month(today))

    async def members_until_end_of_last_month(
        self,
        db: AsyncSession,
        today: Optional[date] = None
    ) -> int:
        """
        Número de socios que ya estaban registrados al cierre del mes anterior.

        Note:
            registration_date <= fin del mes anterior equivale a
            registration_date < medianoche del día 1 del mes actual en la zona
            horaria del gimnasio.
        """
        year, month = self.current_month(today)
        return await member_repository.count_registered_before(
            db, start_of_month_in_gym_timezone(year, month, get_settings().GYM_TIMEZONE)
        )


reporting_service = ReportingService()
