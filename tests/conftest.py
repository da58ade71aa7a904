"""
Pytest configuration and fixtures for the company directory tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from company_directory.app.core import db
from company_directory.app.core.config import settings
from company_directory.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the record store at a fresh SQLite file and migrate it."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "directory.db"))
    monkeypatch.setattr(settings, "artificial_delay_ms", 0)
    db.init_db()
    return db.get_database_path()


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


def make_company(id, name, industry="Technology", location="London", ceo=None, employees=0, founded=2000, **extra):
    """Build a record shaped like the API's JSON."""
    record = {
        "id": id,
        "name": name,
        "ceo": ceo or f"CEO of {name}",
        "industry": industry,
        "location": location,
        "employees": employees,
        "founded": founded,
        "logoIcon": "Briefcase",
    }
    record.update(extra)
    return record


class FakeAPI:
    """In-memory stand-in for ``CompanyDirectoryAPI``.

    Queue an exception in ``fail_next[<method>]`` to make the next call
    to that method raise it.
    """

    def __init__(self, records=None):
        self.records = [dict(r) for r in (records or [])]
        self.fail_next = {}
        self.calls = []
        self._next_id = 1000

    def _maybe_fail(self, method):
        self.calls.append(method)
        exc = self.fail_next.pop(method, None)
        if exc is not None:
            raise exc

    def list_companies(self):
        self._maybe_fail("list_companies")
        return [dict(r) for r in self.records]

    def create_company(self, payload):
        self._maybe_fail("create_company")
        self._next_id += 1
        record = make_company(str(self._next_id), payload.get("name"))
        record.update(payload)
        self.records.insert(0, record)
        return dict(record)

    def update_company(self, company_id, payload):
        self._maybe_fail("update_company")
        for record in self.records:
            if record["id"] == company_id:
                record.update(payload)
                return dict(record)
        raise AssertionError(f"unexpected update of {company_id}")

    def delete_company(self, company_id):
        self._maybe_fail("delete_company")
        self.records = [r for r in self.records if r["id"] != company_id]


@pytest.fixture
def fake_api():
    return FakeAPI(
        [
            make_company("a1", "Acme", industry="Technology", employees=50),
            make_company("b2", "Bexo", industry="Finance", employees=10),
        ]
    )
