from sqlalchemy import Column, String, BigInteger

from app.db.base_class import Base
from app.db.types import ISODate, new_id


class CheckIn(Base):
    __tablename__ = "check_ins"

    id = Column(String(32), primary_key=True, default=new_id)
    member_id = Column(String(32), nullable=False, index=True)
    date = Column(ISODate, nullable=False, index=True)
    time = Column(String(8), nullable=False)  # HH:MM:SS
    timestamp = Column(BigInteger, nullable=False, index=True)  # Epoch en milisegundos

    def __repr__(self):
        return f"<CheckIn(id={self.id}, member_id={self.member_id}, date={self.date} {self.time})>"
