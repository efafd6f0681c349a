from datetime import datetime, timezone
import enum

from sqlalchemy import Column, String, DateTime, Text

from app.db.base_class import Base
from app.db.types import new_id


class TrainerStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Trainer(Base):
    __tablename__ = "trainers"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=False)
    specialty = Column(String(120), nullable=False)
    hire_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    status = Column(String(20), nullable=False, default=TrainerStatus.ACTIVE.value)
    schedule = Column(Text, nullable=True)  # Horario en texto libre

    def __repr__(self):
        return f"<Trainer(id={self.id}, name='{self.name}', specialty='{self.specialty}')>"
