import pytest
from fastapi.testclient import TestClient

import app.main as main_module
from app.core.auth import get_current_user
from app.core.config import Settings
from app.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    # El lifespan construye la Database con estos settings dentro del loop del cliente
    settings = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        CREATE_TABLES_ON_STARTUP=True,
        LOG_DIR=str(tmp_path / "logs"),
    )
    monkeypatch.setattr(main_module, "settings_instance", settings)
    app.dependency_overrides[get_current_user] = lambda: {"sub": "auth0|test-admin"}
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unauthenticated_client(tmp_path, monkeypatch):
    settings = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        CREATE_TABLES_ON_STARTUP=True,
    )
    monkeypatch.setattr(main_module, "settings_instance", settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_prefix():
    return main_module.settings_instance.API_V1_STR


@pytest.fixture
def plan(client, api_prefix):
    response = client.post(
        f"{api_prefix}/plans",
        json={
            "name": "Mensual",
            "description": "Acceso libre durante un mes",
            "price": "99.50",
            "duration": 1,
            "benefits": "Musculación, Cardio",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def member(client, api_prefix, plan):
    response = client.post(
        f"{api_prefix}/members",
        json={
            "name": "Ana Souza",
            "email": "ana@example.com",
            "phone": "11987654321",
            "plan": plan["id"],
            "status": "pending",
        },
    )
    assert response.status_code == 201
    return response.json()
