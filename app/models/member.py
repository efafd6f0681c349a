from datetime import datetime, timezone
import enum

from sqlalchemy import Column, String, DateTime, Text

from app.db.base_class import Base
from app.db.types import ISODate, new_id


class MemberStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"  # Registrado, esperando el primer pago


class Member(Base):
    """
    Socio del gimnasio.

    last_payment_date y next_payment_date permanecen en NULL hasta que se
    registra el primer pago del socio.
    """
    __tablename__ = "members"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=False)
    registration_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True
    )
    birth_date = Column(ISODate, nullable=True)

    # Referencia al plan (sin FK: los borrados no se propagan)
    plan = Column(String(32), nullable=False)
    status = Column(String(20), nullable=False, default=MemberStatus.PENDING.value)

    last_payment_date = Column(ISODate, nullable=True)
    next_payment_date = Column(ISODate, nullable=True)
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Member(id={self.id}, name='{self.name}', status='{self.status}')>"
