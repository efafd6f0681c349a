from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.schemas.checkin import CheckIn as CheckInSchema, CheckInCreate, CheckInUpdate
from app.services.checkin import check_in_service

router = APIRouter()


@router.get("", response_model=List[CheckInSchema])
async def read_check_ins(
    db: AsyncSession = Depends(get_async_db),
) -> List[CheckInSchema]:
    return await check_in_service.list_check_ins(db)


@router.post("", response_model=CheckInSchema, status_code=status.HTTP_201_CREATED)
async def create_check_in(
    *,
    db: AsyncSession = Depends(get_async_db),
    check_in_in: CheckInCreate,
) -> CheckInSchema:
    """Registrar la entrada de un socio; fecha y hora las pone el servidor."""
    return await check_in_service.create_check_in(db, check_in_in.member_id)


@router.put("/{check_in_id}", response_model=CheckInSchema)
async def update_check_in(
    *,
    check_in_id: str = Path(..., description="ID del check-in"),
    db: AsyncSession = Depends(get_async_db),
    check_in_in: CheckInUpdate,
) -> CheckInSchema:
    return await check_in_service.update_check_in(db, check_in_id, check_in_in)


@router.delete("/{check_in_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_check_in(
    check_in_id: str = Path(..., description="ID del check-in"),
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await check_in_service.delete_check_in(db, check_in_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
