# tests/test_errors.py
from sqlalchemy.exc import OperationalError

from app.core.database import get_db


class BrokenSession:
    def query(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM tickets", {}, Exception("database is unavailable"))


def test_persistence_failure_returns_500_with_message(app, client):
    app.dependency_overrides[get_db] = lambda: BrokenSession()

    r = client.get("/tickets")
    assert r.status_code == 500
    assert "database is unavailable" in r.json()["detail"]


def test_unknown_ticket_is_404_not_500(client):
    assert client.get("/tickets/424242").status_code == 404
    assert client.patch("/tickets/424242", json={"email": "x@example.com"}).status_code == 404
    assert client.get("/tickets/424242/export").status_code == 404
