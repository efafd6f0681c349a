from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.trainer import TrainerStatus
from app.schemas.validators import reject_null


class TrainerBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=120)
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=10, max_length=30)
    specialty: str = Field(..., min_length=2, max_length=120)
    status: TrainerStatus
    schedule: Optional[str] = None


class TrainerCreate(TrainerBase):
    pass


class TrainerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=10, max_length=30)
    specialty: Optional[str] = Field(None, min_length=2, max_length=120)
    status: Optional[TrainerStatus] = None
    schedule: Optional[str] = None

    @field_validator("name", "phone", "specialty", "status", mode="before")
    def required_fields_not_null(cls, v):
        return reject_null(v)


class Trainer(TrainerBase):
    id: str
    hire_date: datetime

    class Config:
        from_attributes = True
