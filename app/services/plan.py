from typing import List
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.plan import Plan
from app.repositories.plan import plan_repository
from app.schemas.plan import PlanCreate, PlanUpdate

logger = logging.getLogger(__name__)


class PlanService:

    async def list_plans(self, db: AsyncSession, active_only: bool = False) -> List[Plan]:
        if active_only:
            return await plan_repository.get_active(db)
        return await plan_repository.get_all(db)

    async def get_plan(self, db: AsyncSession, plan_id: str) -> Plan:
        plan = await plan_repository.get(db, id=plan_id)
        if not plan:
            raise NotFoundError("Plan", plan_id)
        return plan

    async def create_plan(self, db: AsyncSession, plan_in: PlanCreate) -> Plan:
        plan = await plan_repository.create(db, obj_in=plan_in.model_dump())
        await db.commit()
        logger.info(f"Plan creado: {plan.name} (ID: {plan.id}, {plan.duration} meses)")
        return plan

    async def update_plan(self, db: AsyncSession, plan_id: str, plan_in: PlanUpdate) -> Plan:
        plan = await self.get_plan(db, plan_id)
        plan = await plan_repository.update(db, db_obj=plan, obj_in=plan_in.model_dump(exclude_unset=True))
        await db.commit()
        return plan

    async def delete_plan(self, db: AsyncSession, plan_id: str) -> str:
        # Los socios que referencian el plan no se modifican
        plan = await plan_repository.remove(db, id=plan_id)
        if not plan:
            raise NotFoundError("Plan", plan_id)
        await db.commit()
        logger.info(f"Plan {plan_id} eliminado")
        return plan_id


plan_service = PlanService()
