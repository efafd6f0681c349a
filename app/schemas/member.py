from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.member import MemberStatus
from app.schemas.validators import reject_null


# Propiedades compartidas
class MemberBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=120, description="Nombre completo")
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=10, max_length=30)
    birth_date: Optional[date] = None
    plan: str = Field(..., min_length=1, description="ID del plan contratado")
    status: MemberStatus
    notes: Optional[str] = None


# Las fechas de pago no se aceptan al crear: las asigna el registro de pagos
class MemberCreate(MemberBase):
    pass


class MemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=10, max_length=30)
    birth_date: Optional[date] = None
    plan: Optional[str] = Field(None, min_length=1)
    status: Optional[MemberStatus] = None
    last_payment_date: Optional[date] = None
    next_payment_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("name", "phone", "plan", "status", mode="before")
    def required_fields_not_null(cls, v):
        return reject_null(v)


class Member(MemberBase):
    id: str
    registration_date: datetime
    last_payment_date: Optional[date] = None
    next_payment_date: Optional[date] = None

    class Config:
        from_attributes = True
