from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.models.member import MemberStatus
from app.schemas.checkin import CheckInUpdate
from app.schemas.member import MemberCreate, MemberUpdate
from app.schemas.payment import PaymentUpdate
from app.schemas.plan import PlanCreate, PlanUpdate
from app.schemas.trainer import TrainerUpdate


def test_plan_benefits_accepts_comma_separated_text():
    plan = PlanCreate(
        name="Trimestral",
        description="Tres meses de acceso",
        price=Decimal("250.00"),
        duration=3,
        benefits=" Piscina, Sauna ,, Clases grupales ",
    )
    assert plan.benefits == ["Piscina", "Sauna", "Clases grupales"]


def test_plan_benefits_keeps_list():
    update = PlanUpdate(benefits=["Piscina"])
    assert update.benefits == ["Piscina"]


@pytest.mark.parametrize("field,value", [("price", Decimal("0")), ("duration", 0), ("description", "abc")])
def test_plan_rejects_invalid_values(field, value):
    data = dict(name="Mensual", description="Un mes de acceso", price=Decimal("10"), duration=1)
    data[field] = value
    with pytest.raises(ValidationError):
        PlanCreate(**data)


def test_member_requires_valid_name_phone_and_email():
    with pytest.raises(ValidationError):
        MemberCreate(name="Al", phone="11987654321", plan="p", status=MemberStatus.ACTIVE)
    with pytest.raises(ValidationError):
        MemberCreate(name="Alice", phone="123", plan="p", status=MemberStatus.ACTIVE)
    with pytest.raises(ValidationError):
        MemberCreate(name="Alice", email="no-es-email", phone="11987654321", plan="p", status=MemberStatus.ACTIVE)


@pytest.mark.parametrize(
    "schema,field",
    [
        (MemberUpdate, "name"),
        (MemberUpdate, "plan"),
        (TrainerUpdate, "specialty"),
        (PlanUpdate, "price"),
        (PlanUpdate, "benefits"),
        (PaymentUpdate, "amount"),
        (PaymentUpdate, "method"),
        (CheckInUpdate, "time"),
    ],
)
def test_update_rejects_null_for_required_columns(schema, field):
    with pytest.raises(ValidationError):
        schema(**{field: None})


def test_update_accepts_null_for_optional_columns():
    assert MemberUpdate(notes=None).model_dump(exclude_unset=True) == {"notes": None}
    assert PaymentUpdate(due_date=None).model_dump(exclude_unset=True) == {"due_date": None}
    assert MemberUpdate().model_dump(exclude_unset=True) == {}
