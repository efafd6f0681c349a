"""
PaymentService - Registro de pagos y renovación de la membresía del socio.

Registrar un pago actualiza las fechas de último/próximo pago del socio y lo
marca como activo. La actualización del socio y la inserción del pago se
confirman en una sola transacción.
"""

from datetime import date
from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.dates import add_months, day_window, resolve_today
from app.core.exceptions import NotFoundError
from app.models.member import MemberStatus
from app.models.payment import Payment
from app.repositories.member import member_repository
from app.repositories.payment import payment_repository
from app.repositories.plan import plan_repository
from app.schemas.payment import PaymentCreate, PaymentUpdate

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Servicio async para pagos.

    Métodos principales:
    - record_payment() - Registrar pago y renovar la membresía del socio
    - get_upcoming_payments() - Pagos con vencimiento en los próximos días
    """

    async def record_payment(self, db: AsyncSession, payment_in: PaymentCreate) -> Payment:
        """
        Registrar un pago y renovar la membresía del socio.

        Args:
            db: Sesión async de base de datos
            payment_in: Datos del pago

        Returns:
            Payment: Pago creado

        Raises:
            NotFoundError: Si el plan o el socio no existen (no se escribe nada)

        Note:
            - next_payment_date = fecha del pago + duración del plan en meses,
              con el día limitado al último día del mes destino
            - Sobrescribe siempre las fechas del socio: el último pago registrado
              gana, aunque su fecha sea anterior a la que ya tenía el socio
            - Socio y pago se confirman juntos; si algo falla se revierte todo
        """
        plan = await plan_repository.get(db, id=payment_in.plan_id)
        if not plan:
            raise NotFoundError("Plan", payment_in.plan_id)

        member = await member_repository.get(db, id=payment_in.member_id)
        if not member:
            raise NotFoundError("Socio", payment_in.member_id)

        next_payment_date = add_months(payment_in.date, plan.duration)

        try:
            await member_repository.update(
                db,
                db_obj=member,
                obj_in={
                    "last_payment_date": payment_in.date,
                    "next_payment_date": next_payment_date,
                    "plan": payment_in.plan_id,
                    "status": MemberStatus.ACTIVE.value,
                }
            )
            payment = await payment_repository.create(db, obj_in=payment_in.model_dump())
            await db.commit()
        except Exception:
            await db.rollback()
            logger.error(
                f"Error registrando pago del socio {payment_in.member_id}; cambios revertidos",
                exc_info=True
            )
            raise

        logger.info(
            f"Pago {payment.id} registrado para socio {member.id}: "
            f"próximo pago {next_payment_date.isoformat()}"
        )
        return payment

    async def get_upcoming_payments(
        self,
        db: AsyncSession,
        today: Optional[date] = None
    ) -> List[Payment]:
        """
        Pagos cuyo vencimiento está en [hoy, hoy + ventana] (ambos incluidos).

        La ventana por defecto es de 7 días (UPCOMING_PAYMENTS_WINDOW_DAYS).
        """
        settings = get_settings()
        today = resolve_today(today, settings.GYM_TIMEZONE)
        start, end = day_window(today, settings.UPCOMING_PAYMENTS_WINDOW_DAYS)
        return await payment_repository.get_due_between(db, start, end)

    async def list_payments(self, db: AsyncSession) -> List[Payment]:
        return await payment_repository.get_all(db)

    async def list_member_payments(self, db: AsyncSession, member_id: str) -> List[Payment]:
        return await payment_repository.get_by_member(db, member_id)

    async def get_payment(self, db: AsyncSession, payment_id: str) -> Payment:
        payment = await payment_repository.get(db, id=payment_id)
        if not payment:
            raise NotFoundError("Pago", payment_id)
        return payment

    async def update_payment(
        self,
        db: AsyncSession,
        payment_id: str,
        payment_in: PaymentUpdate
    ) -> Payment:
        """Actualización parcial; no recalcula las fechas del socio."""
        payment = await self.get_payment(db, payment_id)
        payment = await payment_repository.update(
            db, db_obj=payment, obj_in=payment_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        return payment

    async def delete_payment(self, db: AsyncSession, payment_id: str) -> str:
        payment = await payment_repository.remove(db, id=payment_id)
        if not payment:
            raise NotFoundError("Pago", payment_id)
        await db.commit()
        logger.info(f"Pago {payment_id} eliminado")
        return payment_id


payment_service = PaymentService()
