from datetime import date
from decimal import Decimal

import pytest

from app.db.session import Database
from app.models.member import MemberStatus
from app.models.payment import PaymentMethod, PaymentStatus
from app.schemas.member import MemberCreate
from app.schemas.payment import PaymentCreate
from app.schemas.plan import PlanCreate
from app.services.member import member_service
from app.services.plan import plan_service


# Base de datos SQLite en archivo temporal: el panel abre varias sesiones
# concurrentes y todas deben ver los mismos datos
@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
async def monthly_plan(db_session):
    return await plan_service.create_plan(
        db_session,
        PlanCreate(
            name="Mensual",
            description="Acceso libre durante un mes",
            price=Decimal("99.50"),
            duration=1,
            benefits="Musculación, Cardio",
        )
    )


@pytest.fixture
async def member(db_session, monthly_plan):
    return await member_service.create_member(
        db_session,
        MemberCreate(
            name="Ana Souza",
            email="ana@example.com",
            phone="11987654321",
            plan=monthly_plan.id,
            status=MemberStatus.PENDING,
        )
    )


@pytest.fixture
def make_payment():
    def _make(member_id: str, plan_id: str, paid_on: date, amount: str = "99.50", due_date=None):
        return PaymentCreate(
            member_id=member_id,
            plan_id=plan_id,
            amount=Decimal(amount),
            date=paid_on,
            method=PaymentMethod.PIX,
            status=PaymentStatus.COMPLETED,
            due_date=due_date,
        )
    return _make
