"""
Tests de las agregaciones mensuales.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from app.core.config import get_settings
from app.repositories.checkin import check_in_repository
from app.repositories.member import member_repository
from app.services.payment import payment_service
from app.services.reporting import reporting_service


async def _check_in(db, day, timestamp):
    await check_in_repository.create(
        db, obj_in={"member_id": "m1", "date": day, "time": "08:00:00", "timestamp": timestamp}
    )


class TestPaymentsInMonth:

    async def test_zero_when_no_payments(self, db_session):
        total = await reporting_service.payments_in_month(db_session, 2024, 3)
        assert total == Decimal("0")

    async def test_sums_payments_inside_month_boundaries(self, db_session, member, monthly_plan, make_payment):
        for paid_on, amount in [
            (date(2024, 2, 29), "10.00"),
            (date(2024, 3, 1), "100.25"),
            (date(2024, 3, 31), "50.50"),
            (date(2024, 4, 1), "20.00"),
        ]:
            await payment_service.record_payment(
                db_session, make_payment(member.id, monthly_plan.id, paid_on, amount=amount)
            )

        assert await reporting_service.payments_in_month(db_session, 2024, 3) == Decimal("150.75")
        assert await reporting_service.payments_in_month(db_session, 2024, 2) == Decimal("10.00")

    async def test_this_and_last_month_wrap_year(self, db_session, member, monthly_plan, make_payment):
        await payment_service.record_payment(
            db_session, make_payment(member.id, monthly_plan.id, date(2023, 12, 20), amount="30.00")
        )
        await payment_service.record_payment(
            db_session, make_payment(member.id, monthly_plan.id, date(2024, 1, 2), amount="40.00")
        )
        today = date(2024, 1, 10)

        assert reporting_service.last_month(today) == (2023, 12)
        assert await reporting_service.payments_this_month(db_session, today) == Decimal("40.00")
        assert await reporting_service.payments_last_month(db_session, today) == Decimal("30.00")


class TestCheckInsInMonth:

    async def test_returns_exactly_in_range_check_ins(self, db_session):
        await _check_in(db_session, date(2024, 1, 31), 1)
        await _check_in(db_session, date(2024, 2, 1), 2)
        await _check_in(db_session, date(2024, 2, 29), 3)
        await _check_in(db_session, date(2024, 3, 1), 4)

        found = await reporting_service.check_ins_in_month(db_session, 2024, 2)
        assert sorted(c.timestamp for c in found) == [2, 3]

    async def test_this_and_last_month(self, db_session):
        await _check_in(db_session, date(2024, 2, 10), 1)
        await _check_in(db_session, date(2024, 3, 10), 2)
        await _check_in(db_session, date(2024, 3, 11), 3)
        today = date(2024, 3, 15)

        assert len(await reporting_service.check_ins_this_month(db_session, today)) == 2
        assert len(await reporting_service.check_ins_last_month(db_session, today)) == 1


class TestMembersUntilEndOfLastMonth:

    async def _register_at(self, db, name, plan_id, registered_at):
        member = await member_repository.create(
            db, obj_in={"name": name, "phone": "11900000000", "plan": plan_id, "status": "pending"}
        )
        await member_repository.update(db, db_obj=member, obj_in={"registration_date": registered_at})

    async def test_cutoff_is_gym_local_midnight(self, db_session, monthly_plan, monkeypatch):
        monkeypatch.setattr(get_settings(), "GYM_TIMEZONE", "America/Sao_Paulo")
        # 22:00 del 29/02 en São Paulo ya es marzo en UTC
        await self._register_at(
            db_session, "Bruno Lima", monthly_plan.id, datetime(2024, 3, 1, 1, 0, tzinfo=timezone.utc)
        )
        await self._register_at(
            db_session, "Carla Dias", monthly_plan.id, datetime(2024, 2, 10, 12, 0, tzinfo=timezone.utc)
        )
        # 00:00 del 01/03 en São Paulo
        await self._register_at(
            db_session, "Diego Alves", monthly_plan.id, datetime(2024, 3, 1, 3, 0, tzinfo=timezone.utc)
        )

        count = await reporting_service.members_until_end_of_last_month(db_session, date(2024, 3, 15))
        assert count == 2
