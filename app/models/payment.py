import enum

from sqlalchemy import Column, String, Numeric, Text

from app.db.base_class import Base
from app.db.types import ISODate, new_id


class PaymentMethod(str, enum.Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    CASH = "cash"
    PIX = "pix"
    TRANSFER = "transfer"


class PaymentStatus(str, enum.Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(32), primary_key=True, default=new_id)
    # Referencias sin FK: borrar un socio no borra sus pagos
    member_id = Column(String(32), nullable=False, index=True)
    plan_id = Column(String(32), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(ISODate, nullable=False, index=True)
    method = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default=PaymentStatus.COMPLETED.value)
    notes = Column(Text, nullable=True)
    due_date = Column(ISODate, nullable=True, index=True)

    def __repr__(self):
        return f"<Payment(id={self.id}, member_id={self.member_id}, amount={self.amount}, date={self.date})>"
