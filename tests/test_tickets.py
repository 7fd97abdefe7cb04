# tests/test_tickets.py
import logging

from app.checklist.template import iter_template_tasks, template_task_count


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_create_seeds_checklist_from_template(client, make_ticket):
    ticket = make_ticket()

    assert ticket["status"] == "Not Started"
    assert ticket["completed_at"] is None
    checklist = ticket["checklist"]
    assert len(checklist) == template_task_count()
    assert [(i["category"], i["task"]) for i in checklist] == list(iter_template_tasks())
    orders = [i["sort_order"] for i in checklist]
    assert all(a < b for a, b in zip(orders, orders[1:]))
    assert all(i["status"] == "Not Started" for i in checklist)


def test_create_and_get_ticket_round_trip(client):
    payload = {
        "employee_name": "Tran Thi B",
        "employee_id": "EMP002",
        "email": "b.tran@example.com",
        "position": "Accountant",
        "manager": "Le Van C",
        "last_working_day": "2026-11-30",
        "created_by": "hr.admin",
    }
    r = client.post("/tickets", json=payload)
    assert r.status_code == 201
    tid = r.json()["id"]

    r2 = client.get(f"/tickets/{tid}")
    assert r2.status_code == 200
    data = r2.json()
    for key, value in payload.items():
        assert data[key] == value
    assert len(data["checklist"]) == template_task_count()


def test_omitted_and_blank_optionals_are_null(client, make_ticket):
    ticket = make_ticket(position="", last_working_day="")

    data = client.get(f"/tickets/{ticket['id']}").json()
    assert data["position"] is None
    assert data["manager"] is None
    assert data["last_working_day"] is None
    assert data["created_by"] is None


def test_list_returns_newest_first(client, make_ticket):
    first = make_ticket(employee_id="EMP010")
    second = make_ticket(employee_id="EMP011")

    r = client.get("/tickets")
    assert r.status_code == 200
    ids = [t["id"] for t in r.json()]
    assert ids.index(second["id"]) < ids.index(first["id"])
    assert "checklist" not in r.json()[0]


def test_filter_by_status(client, make_ticket):
    a = make_ticket(employee_id="EMP020")
    b = make_ticket(employee_id="EMP021")
    client.patch(f"/tickets/{b['id']}", json={"status": "Done"})

    r = client.get("/tickets", params={"status": "Not Started"})
    assert r.status_code == 200
    ids = {t["id"] for t in r.json()}
    assert a["id"] in ids
    assert b["id"] not in ids


def test_create_validation_errors(client):
    # missing employee_name
    r1 = client.post("/tickets", json={"employee_id": "E1", "email": "x@example.com"})
    assert r1.status_code == 400
    assert "employee_name" in r1.json()["detail"]

    # missing email
    r2 = client.post("/tickets", json={"employee_name": "X", "employee_id": "E1"})
    assert r2.status_code == 400

    # empty strings
    r3 = client.post("/tickets", json={"employee_name": "", "employee_id": " ", "email": ""})
    assert r3.status_code == 400


def test_patch_ticket_fields(client, make_ticket):
    ticket = make_ticket()

    r = client.patch(
        f"/tickets/{ticket['id']}",
        json={"manager": "New Manager", "last_working_day": "2026-12-31"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["manager"] == "New Manager"
    assert data["last_working_day"] == "2026-12-31"
    assert data["employee_name"] == ticket["employee_name"]


def test_patch_status_overrides_without_checklist(client, make_ticket):
    ticket = make_ticket()

    r = client.patch(f"/tickets/{ticket['id']}", json={"status": "Done"})
    assert r.status_code == 200
    assert r.json()["status"] == "Done"

    detail = client.get(f"/tickets/{ticket['id']}").json()
    assert detail["status"] == "Done"
    assert all(i["status"] == "Not Started" for i in detail["checklist"])


def test_patch_empty_update_is_rejected(client, make_ticket):
    ticket = make_ticket()

    r = client.patch(f"/tickets/{ticket['id']}", json={})
    assert r.status_code == 400
    assert r.json()["detail"] == "No valid fields to update"

    # unknown fields are not updatable
    r2 = client.patch(f"/tickets/{ticket['id']}", json={"created_at": "2020-01-01T00:00:00"})
    assert r2.status_code == 400


def test_patch_unknown_ticket_returns_404(client):
    r = client.patch("/tickets/9999999", json={"manager": "Nobody"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Ticket not found"


def test_get_not_found_returns_404(client):
    r = client.get("/tickets/9999999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Ticket not found"


def test_delete_ticket_cascades_then_404(client, app, make_ticket):
    from app.checklist.models import ChecklistItem

    ticket = make_ticket()

    r = client.delete(f"/tickets/{ticket['id']}")
    assert r.status_code == 204

    r2 = client.get(f"/tickets/{ticket['id']}")
    assert r2.status_code == 404

    with app.state.session_factory() as db:
        remaining = db.query(ChecklistItem).filter(ChecklistItem.ticket_id == ticket["id"]).count()
    assert remaining == 0

    r3 = client.delete(f"/tickets/{ticket['id']}")
    assert r3.status_code == 404


def test_direct_status_override_is_logged(client, make_ticket, caplog):
    ticket = make_ticket()
    caplog.set_level(logging.INFO, logger="app.ticket.services")

    r = client.patch(f"/tickets/{ticket['id']}", json={"status": "In Progress"})
    assert r.status_code == 200

    messages = [rec.getMessage() for rec in caplog.records if rec.name == "app.ticket.services"]
    assert f"Ticket {ticket['id']} status set directly to In Progress" in messages


def test_patch_without_status_does_not_log_override(client, make_ticket, caplog):
    ticket = make_ticket()
    caplog.set_level(logging.INFO, logger="app.ticket.services")

    client.patch(f"/tickets/{ticket['id']}", json={"manager": "Someone"})

    assert not any("status set directly" in rec.getMessage() for rec in caplog.records)
