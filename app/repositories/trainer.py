from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.trainer import Trainer
from app.repositories.async_base import AsyncBaseRepository
from app.schemas.trainer import TrainerCreate, TrainerUpdate


class TrainerRepository(AsyncBaseRepository[Trainer, TrainerCreate, TrainerUpdate]):

    async def create(self, db: AsyncSession, *, obj_in) -> Trainer:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        data = dict(data)
        data.pop("id", None)
        data.pop("hire_date", None)
        return await super().create(db, obj_in=data)

    async def get_all(self, db: AsyncSession) -> List[Trainer]:
        return await self.get_multi(db, order_by="name")


trainer_repository = TrainerRepository(Trainer)
