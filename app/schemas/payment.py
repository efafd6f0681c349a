from typing import Optional
import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from app.models.payment import PaymentMethod, PaymentStatus
from app.schemas.validators import reject_null


class PaymentBase(BaseModel):
    member_id: str = Field(..., min_length=1)
    plan_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    date: dt.date
    method: PaymentMethod
    status: PaymentStatus
    notes: Optional[str] = None
    due_date: Optional[dt.date] = Field(None, description="Fecha de vencimiento, usada para próximos cobros")


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(BaseModel):
    """
    Actualización parcial de un pago.
    No recalcula las fechas de pago del socio.
    """
    member_id: Optional[str] = Field(None, min_length=1)
    plan_id: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    date: Optional[dt.date] = None
    method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    notes: Optional[str] = None
    due_date: Optional[dt.date] = None

    @field_validator("member_id", "plan_id", "amount", "date", "method", "status", mode="before")
    def required_fields_not_null(cls, v):
        return reject_null(v)


class Payment(PaymentBase):
    id: str

    class Config:
        from_attributes = True
