"""
Endpoints de planes de membresía.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.schemas.plan import Plan as PlanSchema, PlanCreate, PlanUpdate
from app.services.plan import plan_service

router = APIRouter()


@router.get("", response_model=List[PlanSchema])
async def read_plans(
    active_only: bool = Query(False, description="Solo planes activos"),
    db: AsyncSession = Depends(get_async_db),
) -> List[PlanSchema]:
    """
    Listar planes.

    Con active_only=true se devuelven solo los planes que se pueden contratar.
    """
    return await plan_service.list_plans(db, active_only=active_only)


@router.post("", response_model=PlanSchema, status_code=status.HTTP_201_CREATED)
async def create_plan(
    *,
    db: AsyncSession = Depends(get_async_db),
    plan_in: PlanCreate,
) -> PlanSchema:
    """
    Crear un plan.

    benefits acepta una lista o un texto separado por comas.
    """
    return await plan_service.create_plan(db, plan_in)


@router.get("/{plan_id}", response_model=PlanSchema)
async def read_plan(
    plan_id: str = Path(..., description="ID del plan"),
    db: AsyncSession = Depends(get_async_db),
) -> PlanSchema:
    return await plan_service.get_plan(db, plan_id)


@router.put("/{plan_id}", response_model=PlanSchema)
async def update_plan(
    *,
    plan_id: str = Path(..., description="ID del plan"),
    db: AsyncSession = Depends(get_async_db),
    plan_in: PlanUpdate,
) -> PlanSchema:
    return await plan_service.update_plan(db, plan_id, plan_in)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(
    plan_id: str = Path(..., description="ID del plan"),
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await plan_service.delete_plan(db, plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
