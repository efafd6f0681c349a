"""
Endpoints de socios.

CRUD de socios más sus pagos y check-ins. Borrar un socio no elimina su
historial de pagos ni de check-ins.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.schemas.checkin import CheckIn as CheckInSchema
from app.schemas.member import Member as MemberSchema, MemberCreate, MemberUpdate
from app.schemas.payment import Payment as PaymentSchema
from app.services.checkin import check_in_service
from app.services.member import member_service
from app.services.payment import payment_service
import logging

logger = logging.getLogger("members_api")

router = APIRouter()


@router.get("", response_model=List[MemberSchema])
async def read_members(
    db: AsyncSession = Depends(get_async_db),
) -> List[MemberSchema]:
    """Listar todos los socios ordenados por nombre."""
    return await member_service.list_members(db)


@router.post("", response_model=MemberSchema, status_code=status.HTTP_201_CREATED)
async def create_member(
    *,
    db: AsyncSession = Depends(get_async_db),
    member_in: MemberCreate,
) -> MemberSchema:
    """
    Crear un socio.

    Las fechas de último y próximo pago se ignoran en el alta; las fija el
    primer pago registrado.
    """
    return await member_service.create_member(db, member_in)


@router.get("/{member_id}", response_model=MemberSchema)
async def read_member(
    member_id: str = Path(..., description="ID del socio"),
    db: AsyncSession = Depends(get_async_db),
) -> MemberSchema:
    return await member_service.get_member(db, member_id)


@router.put("/{member_id}", response_model=MemberSchema)
async def update_member(
    *,
    member_id: str = Path(..., description="ID del socio"),
    db: AsyncSession = Depends(get_async_db),
    member_in: MemberUpdate,
) -> MemberSchema:
    """Actualización parcial: solo se modifican los campos enviados."""
    return await member_service.update_member(db, member_id, member_in)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    member_id: str = Path(..., description="ID del socio"),
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await member_service.delete_member(db, member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{member_id}/payments", response_model=List[PaymentSchema])
async def read_member_payments(
    member_id: str = Path(..., description="ID del socio"),
    db: AsyncSession = Depends(get_async_db),
) -> List[PaymentSchema]:
    await member_service.get_member(db, member_id)
    return await payment_service.list_member_payments(db, member_id)


@router.get("/{member_id}/check-ins", response_model=List[CheckInSchema])
async def read_member_check_ins(
    member_id: str = Path(..., description="ID del socio"),
    db: AsyncSession = Depends(get_async_db),
) -> List[CheckInSchema]:
    await member_service.get_member(db, member_id)
    return await check_in_service.list_member_check_ins(db, member_id)
