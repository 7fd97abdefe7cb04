# tests/conftest.py
import os

import pytest

# keep the module-level app in app.main off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def app(tmp_path):
    settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_ticket(client):
    def _make(**overrides):
        payload = {
            "employee_name": "Nguyen Van A",
            "employee_id": "EMP001",
            "email": "a.nguyen@example.com",
        }
        payload.update(overrides)
        r = client.post("/tickets", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
