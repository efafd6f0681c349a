from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.payment import Payment
from app.repositories.async_base import AsyncBaseRepository
from app.schemas.payment import PaymentCreate, PaymentUpdate


class PaymentRepository(AsyncBaseRepository[Payment, PaymentCreate, PaymentUpdate]):

    async def get_all(self, db: AsyncSession) -> List[Payment]:
        return await self.get_multi(db, order_by="date", descending=True)

    async def get_by_member(self, db: AsyncSession, member_id: str) -> List[Payment]:
        return await self.get_multi(
            db,
            filters={"member_id": member_id},
            order_by="date",
            descending=True
        )

    async def sum_amount_between(self, db: AsyncSession, start: date, end: date) -> Decimal:
        """
        Suma de `amount` de los pagos con fecha en [start, end].

        Returns:
            La suma, o 0 si no hay pagos en el rango
        """
        stmt = select(func.coalesce(func.sum(Payment.amount), 0)).where(
            Payment.date >= start,
            Payment.date <= end
        )
        result = await db.execute(stmt)
        total = result.scalar()
        return Decimal(str(total)) if total is not None else Decimal("0")

    async def get_due_between(self, db: AsyncSession, start: date, end: date) -> List[Payment]:
        return await self.get_multi(
            db,
            range_field="due_date",
            range_start=start,
            range_end=end,
            order_by="due_date"
        )


payment_repository = PaymentRepository(Payment)
