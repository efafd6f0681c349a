from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.schemas.trainer import Trainer as TrainerSchema, TrainerCreate, TrainerUpdate
from app.services.trainer import trainer_service

router = APIRouter()


@router.get("", response_model=List[TrainerSchema])
async def read_trainers(
    db: AsyncSession = Depends(get_async_db),
) -> List[TrainerSchema]:
    return await trainer_service.list_trainers(db)


@router.post("", response_model=TrainerSchema, status_code=status.HTTP_201_CREATED)
async def create_trainer(
    *,
    db: AsyncSession = Depends(get_async_db),
    trainer_in: TrainerCreate,
) -> TrainerSchema:
    return await trainer_service.create_trainer(db, trainer_in)


@router.get("/{trainer_id}", response_model=TrainerSchema)
async def read_trainer(
    trainer_id: str = Path(..., description="ID del entrenador"),
    db: AsyncSession = Depends(get_async_db),
) -> TrainerSchema:
    return await trainer_service.get_trainer(db, trainer_id)


@router.put("/{trainer_id}", response_model=TrainerSchema)
async def update_trainer(
    *,
    trainer_id: str = Path(..., description="ID del entrenador"),
    db: AsyncSession = Depends(get_async_db),
    trainer_in: TrainerUpdate,
) -> TrainerSchema:
    return await trainer_service.update_trainer(db, trainer_id, trainer_in)


@router.delete("/{trainer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trainer(
    trainer_id: str = Path(..., description="ID del entrenador"),
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await trainer_service.delete_trainer(db, trainer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
