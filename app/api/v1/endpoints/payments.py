"""
Endpoints de pagos.

Registrar un pago renueva la membresía del socio (fechas de último y próximo
pago, plan y estado activo) en la misma transacción.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.schemas.payment import Payment as PaymentSchema, PaymentCreate, PaymentUpdate
from app.services.payment import payment_service
import logging

logger = logging.getLogger("payments_api")

router = APIRouter()


@router.get("", response_model=List[PaymentSchema])
async def read_payments(
    db: AsyncSession = Depends(get_async_db),
) -> List[PaymentSchema]:
    """Listar pagos, del más reciente al más antiguo."""
    return await payment_service.list_payments(db)


@router.post("", response_model=PaymentSchema, status_code=status.HTTP_201_CREATED)
async def record_payment(
    *,
    db: AsyncSession = Depends(get_async_db),
    payment_in: PaymentCreate,
) -> PaymentSchema:
    """
    Registrar un pago.

    Returns:
        Pago creado

    Raises:
        404: Si el plan o el socio no existen
    """
    return await payment_service.record_payment(db, payment_in)


# Debe declararse antes de /{payment_id}
@router.get("/upcoming", response_model=List[PaymentSchema])
async def read_upcoming_payments(
    db: AsyncSession = Depends(get_async_db),
) -> List[PaymentSchema]:
    """Pagos que vencen entre hoy y los próximos días (ambos incluidos)."""
    return await payment_service.get_upcoming_payments(db)


@router.get("/{payment_id}", response_model=PaymentSchema)
async def read_payment(
    payment_id: str = Path(..., description="ID del pago"),
    db: AsyncSession = Depends(get_async_db),
) -> PaymentSchema:
    return await payment_service.get_payment(db, payment_id)


@router.put("/{payment_id}", response_model=PaymentSchema)
async def update_payment(
    *,
    payment_id: str = Path(..., description="ID del pago"),
    db: AsyncSession = Depends(get_async_db),
    payment_in: PaymentUpdate,
) -> PaymentSchema:
    return await payment_service.update_payment(db, payment_id, payment_in)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(
    payment_id: str = Path(..., description="ID del pago"),
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await payment_service.delete_payment(db, payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
