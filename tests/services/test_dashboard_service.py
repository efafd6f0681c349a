"""
Tests del panel: agregación concurrente con una sesión por consulta.
"""

import asyncio
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest
import pytz

from app.repositories.member import member_repository
from app.repositories.trainer import trainer_repository
from app.schemas.trainer import TrainerCreate
from app.services.checkin import check_in_service
from app.services.dashboard import dashboard_service
from app.services.payment import payment_service
from app.services.reporting import reporting_service
from app.services.trainer import trainer_service

TODAY = date(2024, 3, 15)


@pytest.fixture
async def populated(db_session, member, monthly_plan, make_payment):
    tz = pytz.timezone("America/Sao_Paulo")
    await member_repository.update(
        db_session,
        db_obj=member,
        obj_in={"registration_date": datetime(2024, 1, 10, tzinfo=timezone.utc)}
    )
    await db_session.commit()
    await trainer_service.create_trainer(
        db_session,
        TrainerCreate(name="Carlos Mendes", phone="11912345678", specialty="Funcional", status="active")
    )
    await payment_service.record_payment(
        db_session, make_payment(member.id, monthly_plan.id, date(2024, 2, 10), amount="80.25")
    )
    await payment_service.record_payment(
        db_session, make_payment(member.id, monthly_plan.id, date(2024, 3, 10), amount="99.50")
    )
    for day in (date(2024, 2, 20), date(2024, 3, 1), date(2024, 3, 14)):
        await check_in_service.create_check_in(
            db_session, member.id, now=tz.localize(datetime(day.year, day.month, day.day, 8))
        )


class TestDashboardService:

    async def test_aggregates_current_and_previous_month(self, database, populated):
        data = await dashboard_service.get_dashboard_data(database, today=TODAY)

        assert data.members_count == 1
        assert data.members_last_month == 1
        assert data.trainers_count == 1
        assert data.payments_amount == Decimal("99.50")
        assert data.payments_last_month == Decimal("80.25")
        assert data.check_ins_count == 2
        assert data.check_ins_last_month == 1
        assert len(data.members) == data.members_count
        assert len(data.check_ins) == data.check_ins_count

    async def test_counts_match_independent_queries(self, database, db_session, populated):
        data = await dashboard_service.get_dashboard_data(database, today=TODAY)

        assert data.members_count == await member_repository.count(db_session)
        assert data.trainers_count == await trainer_repository.count(db_session)
        assert data.payments_amount == await reporting_service.payments_this_month(db_session, TODAY)
        assert data.check_ins_count == len(await reporting_service.check_ins_this_month(db_session, TODAY))

    async def test_empty_store(self, database):
        data = await dashboard_service.get_dashboard_data(database, today=TODAY)
        assert data.members_count == 0
        assert data.payments_amount == Decimal("0")
        assert data.check_ins == []

    async def test_any_failure_fails_whole_snapshot(self, database):
        async def broken(db):
            raise RuntimeError("almacén caído")

        with patch.object(trainer_repository, "get_all", broken):
            with pytest.raises(RuntimeError):
                await dashboard_service.get_dashboard_data(database, today=TODAY)

    async def test_failure_waits_for_cancelled_queries(self, database):
        cancelled = []

        async def broken(db):
            await asyncio.sleep(0.05)
            raise RuntimeError("almacén caído")

        async def slow(db, today=None):
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.append("payments_this_month")
                raise

        with patch.object(trainer_repository, "get_all", broken), \
                patch.object(reporting_service, "payments_this_month", slow):
            with pytest.raises(RuntimeError):
                await dashboard_service.get_dashboard_data(database, today=TODAY)

        assert cancelled == ["payments_this_month"]

    async def test_timeout(self, database):
        async def slow(db, today=None):
            await asyncio.sleep(5)

        with patch.object(reporting_service, "payments_this_month", slow):
            with pytest.raises(TimeoutError):
                await dashboard_service.get_dashboard_data(database, today=TODAY, timeout=0.05)


class TestMonthlyReport:

    async def test_report_for_arbitrary_month(self, db_session, populated):
        report = await dashboard_service.get_monthly_report(db_session, 2024, 2)

        assert report.start_date == date(2024, 2, 1)
        assert report.end_date == date(2024, 2, 29)
        assert report.payments_total == Decimal("80.25")
        assert report.check_ins_count == 1
