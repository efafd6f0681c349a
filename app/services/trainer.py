from typing import List
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.trainer import Trainer
from app.repositories.trainer import trainer_repository
from app.schemas.trainer import TrainerCreate, TrainerUpdate

logger = logging.getLogger(__name__)


class TrainerService:

    async def list_trainers(self, db: AsyncSession) -> List[Trainer]:
        return await trainer_repository.get_all(db)

    async def get_trainer(self, db: AsyncSession, trainer_id: str) -> Trainer:
        trainer = await trainer_repository.get(db, id=trainer_id)
        if not trainer:
            raise NotFoundError("Entrenador", trainer_id)
        return trainer

    async def create_trainer(self, db: AsyncSession, trainer_in: TrainerCreate) -> Trainer:
        trainer = await trainer_repository.create(
            db, obj_in=trainer_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        logger.info(f"Entrenador creado: {trainer.name} (ID: {trainer.id})")
        return trainer

    async def update_trainer(self, db: AsyncSession, trainer_id: str, trainer_in: TrainerUpdate) -> Trainer:
        trainer = await self.get_trainer(db, trainer_id)
        trainer = await trainer_repository.update(
            db, db_obj=trainer, obj_in=trainer_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        return trainer

    async def delete_trainer(self, db: AsyncSession, trainer_id: str) -> str:
        trainer = await trainer_repository.remove(db, id=trainer_id)
        if not trainer:
            raise NotFoundError("Entrenador", trainer_id)
        await db.commit()
        logger.info(f"Entrenador {trainer_id} eliminado")
        return trainer_id


trainer_service = TrainerService()
