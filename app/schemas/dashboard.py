from typing import List
from datetime import date
from decimal import Decimal
from pydantic import BaseModel

from app.schemas.member import Member
from app.schemas.trainer import Trainer
from app.schemas.checkin import CheckIn


class DashboardData(BaseModel):
    """Foto agregada del gimnasio para el panel principal."""
    members: List[Member]
    members_count: int
    members_last_month: int
    trainers: List[Trainer]
    trainers_count: int
    payments_amount: Decimal
    payments_last_month: Decimal
    check_ins: List[CheckIn]
    check_ins_count: int
    check_ins_last_month: int


class MonthlyReport(BaseModel):
    year: int
    month: int
    start_date: date
    end_date: date
    payments_total: Decimal
    check_ins_count: int
