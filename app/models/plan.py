from sqlalchemy import Column, String, Integer, Boolean, Numeric, Text, JSON

from app.db.base_class import Base
from app.db.types import new_id


class Plan(Base):
    """
    Plan de suscripción del gimnasio.
    La duración se expresa en meses de calendario.
    """
    __tablename__ = "plans"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # En meses
    benefits = Column(JSON, nullable=False, default=list)
    active = Column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self):
        return f"<Plan(id={self.id}, name='{self.name}', duration={self.duration})>"
