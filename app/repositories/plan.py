from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.plan import Plan
from app.repositories.async_base import AsyncBaseRepository
from app.schemas.plan import PlanCreate, PlanUpdate


class PlanRepository(AsyncBaseRepository[Plan, PlanCreate, PlanUpdate]):

    async def get_all(self, db: AsyncSession) -> List[Plan]:
        return await self.get_multi(db, order_by="name")

    async def get_active(self, db: AsyncSession) -> List[Plan]:
        return await self.get_multi(db, filters={"active": True}, order_by="name")


plan_repository = PlanRepository(Plan)
