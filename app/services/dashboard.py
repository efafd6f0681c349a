"""
DashboardService - Foto agregada del gimnasio para el panel principal.

Todas las consultas se lanzan en paralelo, cada una con su propia sesión
(una AsyncSession no admite uso concurrente). Si cualquiera falla, falla
la foto completa; no hay degradación parcial ni caché.
"""

import asyncio
from datetime import date
from typing import Awaitable, Callable, Optional, TypeVar
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.dates import month_date_range, resolve_today
from app.db.session import Database
from app.repositories.member import member_repository
from app.repositories.trainer import trainer_repository
from app.schemas.checkin import CheckIn as CheckInSchema
from app.schemas.dashboard import DashboardData, MonthlyReport
from app.schemas.member import Member as MemberSchema
from app.schemas.trainer import Trainer as TrainerSchema
from app.services.reporting import reporting_service

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardService:
    """
    Servicio del panel principal.

    Métodos principales:
    - get_dashboard_data() - Socios, entrenadores, pagos y check-ins del mes
      actual y del anterior
    - get_monthly_report() - Totales de un mes arbitrario
    """

    async def _fetch(
        self,
        database: Database,
        query: Callable[[AsyncSession], Awaitable[T]]
    ) -> T:
        async with database.session() as db:
            return await query(db)

    async def get_dashboard_data(
        self,
        database: Database,
        today: Optional[date] = None,
        timeout: Optional[float] = None
    ) -> DashboardData:
        """
        Obtener la foto del panel.

        Args:
            database: Cliente del almacén (una sesión por subconsulta)
            today: Fecha de referencia (default: hoy en la zona del gimnasio)
            timeout: Segundos máximos para la agregación completa
                (default: DASHBOARD_TIMEOUT_SECONDS)

        Returns:
            DashboardData con conteos, totales y las listas para tendencias

        Raises:
            Cualquier error de una subconsulta; las demás se cancelan
            TimeoutError: Si se supera el tiempo máximo
        """
        settings = get_settings()
        if timeout is None:
            timeout = settings.DASHBOARD_TIMEOUT_SECONDS
        # Una sola fecha de referencia para todas las subconsultas
        today = resolve_today(today, settings.GYM_TIMEZONE)

        queries = [
            lambda db: member_repository.get_all(db),
            lambda db: reporting_service.members_until_end_of_last_month(db, today),
            lambda db: trainer_repository.get_all(db),
            lambda db: reporting_service.payments_this_month(db, today),
            lambda db: reporting_service.payments_last_month(db, today),
            lambda db: reporting_service.check_ins_this_month(db, today),
            lambda db: reporting_service.check_ins_last_month(db, today),
        ]
        tasks = [asyncio.ensure_future(self._fetch(database, query)) for query in queries]

        try:
            (
                members,
                members_last_month,
                trainers,
                payments_this_month,
                payments_last_month,
                check_ins_this_month,
                check_ins_last_month,
            ) = await asyncio.wait_for(asyncio.gather(*tasks), timeout=timeout)
        except Exception as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error(f"Error en get_dashboard_data: {e}", exc_info=True)
            raise

        return DashboardData(
            members=[MemberSchema.model_validate(m) for m in members],
            members_count=len(members),
            members_last_month=members_last_month,
            trainers=[TrainerSchema.model_validate(t) for t in trainers],
            trainers_count=len(trainers),
            payments_amount=payments_this_month,
            payments_last_month=payments_last_month,
            check_ins=[CheckInSchema.model_validate(c) for c in check_ins_this_month],
            check_ins_count=len(check_ins_this_month),
            check_ins_last_month=len(check_ins_last_month),
        )

    async def get_monthly_report(self, db: AsyncSession, year: int, month: int) -> MonthlyReport:
        start, end = month_date_range(year, month)
        payments_total = await reporting_service.payments_in_month(db, year, month)
        check_ins = await reporting_service.check_ins_in_month(db, year, month)
        return MonthlyReport(
            year=year,
            month=month,
            start_date=start,
            end_date=end,
            payments_total=payments_total,
            check_ins_count=len(check_ins),
        )


dashboard_service = DashboardService()
