from datetime import datetime
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.async_base import AsyncBaseRepository
from app.schemas.member import MemberCreate, MemberUpdate


class MemberRepository(AsyncBaseRepository[Member, MemberCreate, MemberUpdate]):

    async def create(self, db: AsyncSession, *, obj_in) -> Member:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        data = dict(data)
        # La fecha de registro y las fechas de pago las asigna el sistema
        for field in ("id", "registration_date", "last_payment_date", "next_payment_date"):
            data.pop(field, None)
        return await super().create(db, obj_in=data)

    async def get_all(self, db: AsyncSession) -> List[Member]:
        return await self.get_multi(db, order_by="name")

    async def count_registered_before(self, db: AsyncSession, moment: datetime) -> int:
        """Número de socios con fecha de registro anterior a `moment`."""
        stmt = select(func.count(Member.id)).where(Member.registration_date < moment)
        result = await db.execute(stmt)
        return result.scalar() or 0


# Instancia singleton del repositorio
member_repository = MemberRepository(Member)
