from typing import List, Optional, Union
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from app.schemas.validators import reject_null


def _split_benefits(v: Union[str, List[str], None]):
    """Acepta una lista o un texto separado por comas ("Piscina, Sauna")."""
    if isinstance(v, str):
        return [benefit.strip() for benefit in v.split(",") if benefit.strip()]
    return v


class PlanBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=5)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    duration: int = Field(..., gt=0, description="Duración en meses")
    benefits: List[str] = Field(default_factory=list)
    active: bool = True

    @field_validator("benefits", mode="before")
    def parse_benefits(cls, v):
        return _split_benefits(v)


class PlanCreate(PlanBase):
    pass


class PlanUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=5)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    duration: Optional[int] = Field(None, gt=0)
    benefits: Optional[List[str]] = None
    active: Optional[bool] = None

    @field_validator("benefits", mode="before")
    def parse_benefits(cls, v):
        return _split_benefits(reject_null(v))

    @field_validator("name", "description", "price", "duration", "active", mode="before")
    def required_fields_not_null(cls, v):
        return reject_null(v)


class Plan(PlanBase):
    id: str

    class Config:
        from_attributes = True
