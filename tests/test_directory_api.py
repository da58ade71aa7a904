"""Tests for the requests-based API client."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from company_directory.errors import NotFoundFailure, TransportFailure, ValidationFailure
from directory_api import CompanyDirectoryAPI


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://test/api/v1/companies"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return CompanyDirectoryAPI(base_url="http://test/api/v1/", api_key="secret", session=session)


def test_list_companies(api, session):
    session.request.return_value = make_response(200, [{"id": "a1", "name": "Acme"}])
    assert api.list_companies() == [{"id": "a1", "name": "Acme"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://test/api/v1/companies"
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}
    assert kwargs["timeout"] == 15


def test_list_companies_unwraps_envelope(api, session):
    session.request.return_value = make_response(200, {"items": [{"id": "a1"}]})
    assert api.list_companies() == [{"id": "a1"}]


def test_list_companies_rejects_unexpected_body(api, session):
    session.request.return_value = make_response(200, {"unexpected": True})
    with pytest.raises(TransportFailure):
        api.list_companies()


def test_create_company_sends_payload(api, session):
    session.request.return_value = make_response(201, {"id": "c3", "name": "Cora"})
    record = api.create_company({"name": "Cora"})
    assert record["id"] == "c3"
    assert session.request.call_args.kwargs["json"] == {"name": "Cora"}
    assert session.request.call_args.kwargs["method"] == "POST"


def test_validation_error_is_typed(api, session):
    body = {"detail": [{"loc": ["body", "location"], "msg": "Field required", "type": "missing"}]}
    session.request.return_value = make_response(422, body)
    with pytest.raises(ValidationFailure) as excinfo:
        api.create_company({"name": "Cora"})
    assert excinfo.value.message == "location: Field required"
    assert excinfo.value.details == body["detail"]


def test_bad_request_is_a_validation_failure(api, session):
    session.request.return_value = make_response(400, {"message": "Invalid data provided."})
    with pytest.raises(ValidationFailure, match="Invalid data provided."):
        api.create_company({})


def test_not_found_on_update(api, session):
    session.request.return_value = make_response(404, {"detail": "Company x not found"})
    with pytest.raises(NotFoundFailure, match="Company x not found"):
        api.update_company("x", {"employees": 3})
    assert session.request.call_args.kwargs["url"] == "http://test/api/v1/companies/x"
    assert session.request.call_args.kwargs["method"] == "PUT"


def test_delete_returns_none_on_204(api, session):
    session.request.return_value = make_response(204)
    assert api.delete_company("a1") is None
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_server_error_is_a_transport_failure(api, session):
    session.request.return_value = make_response(500, text="boom")
    with pytest.raises(TransportFailure) as excinfo:
        api.list_companies()
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "boom"


def test_connection_error_is_a_transport_failure(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(TransportFailure) as excinfo:
        api.list_companies()
    assert excinfo.value.status_code is None


def test_non_json_success_body(api, session):
    session.request.return_value = make_response(200, text="<html>")
    with pytest.raises(TransportFailure):
        api.list_companies()


def test_create_response_without_id_is_rejected(api, session):
    session.request.return_value = make_response(201, {"name": "Cora"})
    with pytest.raises(TransportFailure):
        api.create_company({"name": "Cora"})


def test_default_base_url_comes_from_environment(monkeypatch):
    monkeypatch.setenv("DIRECTORY_API_URL", "http://example.com/api/v1/")
    assert CompanyDirectoryAPI().base_url == "http://example.com/api/v1"
