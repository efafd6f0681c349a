from typing import Optional
import datetime as dt
from pydantic import BaseModel, Field, field_validator

from app.schemas.validators import reject_null


class CheckInCreate(BaseModel):
    member_id: str = Field(..., min_length=1)


class CheckInUpdate(BaseModel):
    member_id: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}:\d{2}$")

    @field_validator("member_id", "date", "time", mode="before")
    def required_fields_not_null(cls, v):
        return reject_null(v)


class CheckIn(BaseModel):
    id: str
    member_id: str
    date: dt.date
    time: str
    timestamp: int

    class Config:
        from_attributes = True
