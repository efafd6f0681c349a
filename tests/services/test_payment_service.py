"""
Tests del registro de pagos y de la consulta de próximos vencimientos.
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import NotFoundError
from app.repositories.member import member_repository
from app.repositories.payment import payment_repository
from app.schemas.payment import PaymentUpdate
from app.schemas.plan import PlanCreate
from app.services.payment import payment_service
from app.services.plan import plan_service


class TestRecordPayment:

    async def test_renews_membership(self, db_session, member, monthly_plan, make_payment):
        payment = await payment_service.record_payment(
            db_session, make_payment(member.id, monthly_plan.id, date(2024, 1, 15))
        )

        assert payment.id
        assert payment.date == date(2024, 1, 15)
        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.last_payment_date == date(2024, 1, 15)
        assert refreshed.next_payment_date == date(2024, 2, 15)
        assert refreshed.status == "active"
        assert refreshed.plan == monthly_plan.id

    async def test_end_of_month_is_clamped(self, db_session, member, monthly_plan, make_payment):
        await payment_service.record_payment(
            db_session, make_payment(member.id, monthly_plan.id, date(2024, 1, 31))
        )
        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.next_payment_date == date(2024, 2, 29)

    async def test_uses_plan_duration_in_months(self, db_session, member, make_payment):
        quarterly = await plan_service.create_plan(
            db_session,
            PlanCreate(name="Trimestral", description="Tres meses de acceso", price="250.00", duration=3)
        )
        await payment_service.record_payment(
            db_session, make_payment(member.id, quarterly.id, date(2024, 11, 30), amount="250.00")
        )
        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.next_payment_date == date(2025, 2, 28)
        assert refreshed.plan == quarterly.id

    async def test_last_recorded_payment_wins(self, db_session, member, monthly_plan, make_payment):
        await payment_service.record_payment(db_session, make_payment(member.id, monthly_plan.id, date(2024, 3, 10)))
        await payment_service.record_payment(db_session, make_payment(member.id, monthly_plan.id, date(2024, 1, 5)))

        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.last_payment_date == date(2024, 1, 5)
        assert refreshed.next_payment_date == date(2024, 2, 5)

    async def test_unknown_plan_writes_nothing(self, db_session, member, make_payment):
        with pytest.raises(NotFoundError):
            await payment_service.record_payment(db_session, make_payment(member.id, "no-existe", date(2024, 1, 15)))

        assert await payment_repository.count(db_session) == 0
        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.last_payment_date is None
        assert refreshed.status == "pending"

    async def test_unknown_member_writes_nothing(self, db_session, monthly_plan, make_payment):
        with pytest.raises(NotFoundError):
            await payment_service.record_payment(
                db_session, make_payment("no-existe", monthly_plan.id, date(2024, 1, 15))
            )
        assert await payment_repository.count(db_session) == 0

    async def test_failed_insert_rolls_back_member_update(
        self, database, db_session, member, monthly_plan, make_payment
    ):
        member_id = member.id
        payment_in = make_payment(member_id, monthly_plan.id, date(2024, 1, 15))

        with patch.object(payment_repository, "create", AsyncMock(side_effect=SQLAlchemyError("boom"))):
            with pytest.raises(SQLAlchemyError):
                await payment_service.record_payment(db_session, payment_in)

        async with database.session() as other:
            stored = await member_repository.get(other, id=member_id)
            assert stored.last_payment_date is None
            assert stored.next_payment_date is None
            assert stored.status == "pending"
            assert await payment_repository.count(other) == 0


class TestUpcomingPayments:

    async def test_window_is_today_to_seven_days_ahead(self, db_session, member, monthly_plan, make_payment):
        today = date(2024, 3, 10)
        due_dates = [date(2024, 3, 9), date(2024, 3, 10), date(2024, 3, 17), date(2024, 3, 18), None]
        for due in due_dates:
            await payment_service.record_payment(
                db_session, make_payment(member.id, monthly_plan.id, date(2024, 2, 10), due_date=due)
            )

        upcoming = await payment_service.get_upcoming_payments(db_session, today=today)

        assert [p.due_date for p in upcoming] == [date(2024, 3, 10), date(2024, 3, 17)]

    async def test_empty_when_nothing_due(self, db_session):
        assert await payment_service.get_upcoming_payments(db_session, today=date(2024, 3, 10)) == []


class TestPaymentCrud:

    async def test_update_does_not_touch_member(self, db_session, member, monthly_plan, make_payment):
        payment = await payment_service.record_payment(
            db_session, make_payment(member.id, monthly_plan.id, date(2024, 1, 15))
        )
        updated = await payment_service.update_payment(
            db_session, payment.id, PaymentUpdate(date=date(2024, 1, 20), notes="Corregido")
        )
        assert updated.date == date(2024, 1, 20)
        assert updated.notes == "Corregido"
        refreshed = await member_repository.get(db_session, id=member.id)
        assert refreshed.last_payment_date == date(2024, 1, 15)

    async def test_get_and_delete_missing_payment(self, db_session):
        with pytest.raises(NotFoundError):
            await payment_service.get_payment(db_session, "no-existe")
        with pytest.raises(NotFoundError):
            await payment_service.delete_payment(db_session, "no-existe")
