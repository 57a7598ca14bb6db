from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from userlookup.api.app import create_app
from userlookup.api.dependencies import get_user_gateway
from userlookup.api.endpoints.users import ErrorResponse, parse_user_id
from userlookup.api.openapi import OPENAPI_DOCUMENT

from .conftest import SEEDED_USERS


class RecordingGateway:
    """In-memory gateway that records every storage call."""

    def __init__(self, records):
        self.records = records
        self.calls: list[tuple] = []

    async def get_by_id(self, user_id: int):
        self.calls.append(("get_by_id", user_id))
        return next((r for r in self.records if r.id == user_id), None)

    async def get_all(self):
        self.calls.append(("get_all",))
        return list(self.records)


@pytest.fixture
def gateway():
    # Stored rows may carry more columns than the public projection
    return RecordingGateway(
        [
            SimpleNamespace(id=1, name="Ada", email="ada@example.com"),
            SimpleNamespace(id=2, name="Grace", email="grace@example.com"),
        ]
    )


@pytest.fixture
def stub_client(gateway):
    app = create_app()
    app.dependency_overrides[get_user_gateway] = lambda: gateway
    # No `with`: the lifespan (and its database connection) is not needed here
    return TestClient(app)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", 1), ("42", 42), (" 7 ", 7), ("-3", -3), ("+5", 5)],
)
def test_parse_user_id_accepts_integers(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["abc", "1.5", "", "1e3", "1_000", "0x10", "12abc"])
def test_parse_user_id_rejects_non_integers(raw):
    assert parse_user_id(raw) is None


@pytest.mark.unit
def test_get_user_projects_id_and_name(stub_client, gateway):
    resp = stub_client.get("/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Ada"}
    assert gateway.calls == [("get_by_id", 1)]


@pytest.mark.unit
def test_get_user_invalid_id_never_reaches_storage(stub_client, gateway):
    resp = stub_client.get("/users/abc")
    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid id"}
    assert gateway.calls == []


@pytest.mark.unit
def test_get_user_not_found(stub_client, gateway):
    resp = stub_client.get("/users/99")
    assert resp.status_code == 404
    assert resp.json() == {"error": "not found"}
    assert gateway.calls == [("get_by_id", 99)]


@pytest.mark.unit
def test_list_users_projects_every_record(stub_client, gateway):
    resp = stub_client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}]
    assert gateway.calls == [("get_all",)]


@pytest.mark.unit
def test_list_users_empty(gateway):
    app = create_app()
    empty = RecordingGateway([])
    app.dependency_overrides[get_user_gateway] = lambda: empty
    resp = TestClient(app).get("/users")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.integration
def test_get_each_stored_user(client):
    for user in SEEDED_USERS:
        resp = client.get(f"/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.json() == user


@pytest.mark.integration
def test_example_lookups(client):
    assert client.get("/users/1").json() == {"id": 1, "name": "Ada"}
    assert client.get("/users/99").status_code == 404
    assert client.get("/users/foo").status_code == 400


@pytest.mark.integration
def test_huge_id_is_not_found(client):
    resp = client.get(f"/users/{2**70}")
    assert resp.status_code == 404


@pytest.mark.integration
def test_list_users_matches_storage(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == SEEDED_USERS


@pytest.mark.integration
def test_storage_failure_is_internal_error(broken_storage_client):
    assert broken_storage_client.get("/users").status_code == 500
    assert broken_storage_client.get("/users/1").status_code == 500


@pytest.mark.integration
def test_invalid_id_still_rejected_when_storage_is_broken(broken_storage_client):
    resp = broken_storage_client.get("/users/abc")
    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid id"}


@pytest.mark.unit
@pytest.mark.parametrize("path", ["/users/abc", "/users/99"])
def test_error_bodies_match_documented_error_schema(stub_client, path):
    body = stub_client.get(path).json()
    assert set(body) == set(OPENAPI_DOCUMENT["components"]["schemas"]["Error"]["required"])
    assert ErrorResponse.model_validate(body).error in {"invalid id", "not found"}
