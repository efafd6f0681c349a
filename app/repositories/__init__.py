# Inicializador del paquete repositories
from app.repositories.async_base import AsyncBaseRepository
from app.repositories.member import member_repository
from app.repositories.trainer import trainer_repository
from app.repositories.plan import plan_repository
from app.repositories.payment import payment_repository
from app.repositories.checkin import check_in_repository

__all__ = [
    "AsyncBaseRepository",
    "member_repository",
    "trainer_repository",
    "plan_repository",
    "payment_repository",
    "check_in_repository",
]
