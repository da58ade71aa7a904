"""Integration tests for the /api/v1/companies routes."""

from __future__ import annotations

from datetime import date

BASE = "/api/v1/companies"

ACME = {"name": "Acme", "ceo": "Jane Doe", "industry": "Technology", "location": "London"}


def test_health(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "running" in res.json()["message"]


def test_list_starts_empty(client):
    res = client.get(BASE)
    assert res.status_code == 200
    assert res.json() == []


def test_create_fills_defaults(client):
    res = client.post(BASE, json=ACME)
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Acme"
    assert data["employees"] == 0
    assert data["founded"] == date.today().year
    assert data["logoIcon"] == "Briefcase"
    assert len(data["id"]) == 32
    assert data["createdAt"] and data["updatedAt"]


def test_create_accepts_all_fields(client):
    res = client.post(BASE, json={**ACME, "employees": 120, "founded": 1999, "logoIcon": "Cpu"})
    assert res.status_code == 201
    data = res.json()
    assert (data["employees"], data["founded"], data["logoIcon"]) == (120, 1999, "Cpu")


def test_create_missing_required_field_is_rejected(client):
    res = client.post(BASE, json={"name": "Acme", "ceo": "Jane Doe", "industry": "Technology"})
    assert res.status_code == 422
    assert client.get(BASE).json() == []


def test_create_rejects_empty_name_and_negative_employees(client):
    assert client.post(BASE, json={**ACME, "name": ""}).status_code == 422
    assert client.post(BASE, json={**ACME, "employees": -1}).status_code == 422


def test_industry_is_not_restricted_to_ui_options(client):
    res = client.post(BASE, json={**ACME, "industry": "Aerospace", "location": "Berlin"})
    assert res.status_code == 201


def test_list_returns_newest_first(client):
    first = client.post(BASE, json=ACME).json()
    second = client.post(BASE, json={**ACME, "name": "Bexo"}).json()
    ids = [c["id"] for c in client.get(BASE).json()]
    assert ids == [second["id"], first["id"]]


def test_get_company(client):
    created = client.post(BASE, json=ACME).json()
    res = client.get(f"{BASE}/{created['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Acme"
    assert client.get(f"{BASE}/missing").status_code == 404


def test_update_is_partial(client):
    created = client.post(BASE, json={**ACME, "employees": 10}).json()
    res = client.put(f"{BASE}/{created['id']}", json={"employees": 25, "name": None})
    assert res.status_code == 200
    data = res.json()
    assert data["employees"] == 25
    assert data["name"] == "Acme"
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] >= created["updatedAt"]


def test_update_accepts_camel_case_icon(client):
    created = client.post(BASE, json=ACME).json()
    res = client.put(f"{BASE}/{created['id']}", json={"logoIcon": "Rocket"})
    assert res.json()["logoIcon"] == "Rocket"


def test_update_unknown_company(client):
    res = client.put(f"{BASE}/does-not-exist", json={"employees": 1})
    assert res.status_code == 404


def test_update_rejects_invalid_values(client):
    created = client.post(BASE, json=ACME).json()
    res = client.put(f"{BASE}/{created['id']}", json={"employees": "many"})
    assert res.status_code == 422


def test_delete(client):
    created = client.post(BASE, json=ACME).json()
    res = client.delete(f"{BASE}/{created['id']}")
    assert res.status_code == 204
    assert client.get(BASE).json() == []
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404


def test_unversioned_prefix_serves_same_routes(client):
    created = client.post("/api/companies", json=ACME).json()
    assert [c["id"] for c in client.get(BASE).json()] == [created["id"]]


def test_debug_flag_comes_from_settings(monkeypatch):
    from company_directory.app.core.config import settings
    from company_directory.app.main import create_app

    monkeypatch.setattr(settings, "debug", True)
    assert create_app().debug is True
    monkeypatch.setattr(settings, "debug", False)
    assert create_app().debug is False
