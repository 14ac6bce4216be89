import re
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from user_api.app.api.endpoints.users import format_user_id, parse_user_id
from user_api.app.main import create_app
from user_api.app.services.user_store import UserStore


def _parse_ts(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_list_users_returns_seed_data(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert "message" not in body
    first = body["data"][0]
    assert set(first) == {"id", "name", "email", "createdAt"}
    assert first["id"] == 1
    assert _parse_ts(first["createdAt"]) == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert first["createdAt"] == "2024-01-15T00:00:00.000Z"


def test_list_users_accepts_trailing_slash(client):
    resp = client.get("/api/users/")
    assert resp.status_code == 200
    assert resp.json()["count"] == 2


def test_get_user(client):
    resp = client.get("/api/users/2")
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "data": {
            "id": 2,
            "name": "Jane Smith",
            "email": "jane@example.com",
            "createdAt": resp.json()["data"]["createdAt"],
        },
    }


def test_get_unknown_user_is_404(client):
    resp = client.get("/api/users/999")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "User with id 999 not found"}


def test_get_unparseable_id_is_404(client):
    resp = client.get("/api/users/abc")
    assert resp.status_code == 404
    assert resp.json()["message"] == "User with id NaN not found"


def test_id_with_trailing_characters_uses_leading_digits(client):
    resp = client.get("/api/users/2abc")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == 2


def test_create_user(client, store):
    resp = client.post("/api/users", json={"name": "A", "email": "a@x.com"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert body["data"]["id"] == 3
    assert body["data"]["name"] == "A"
    assert store.get_by_id(3) is not None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "A"},
        {"email": "a@x.com"},
        {"name": "", "email": "a@x.com"},
        {"name": "A", "email": ""},
        {"name": None, "email": "a@x.com"},
    ],
)
def test_create_requires_name_and_email(client, store, payload):
    resp = client.post("/api/users", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Name and email are required"}
    assert store.count() == 2


def test_create_without_body_is_400(client):
    resp = client.post("/api/users")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Name and email are required"


def test_malformed_json_is_400(client, store):
    resp = client.post(
        "/api/users",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid request body"}
    assert store.count() == 2


def test_non_string_fields_are_400(client):
    resp = client.post("/api/users", json={"name": 1, "email": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_update_user(client):
    resp = client.put("/api/users/1", json={"name": "B", "email": "b@x.com"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "User updated successfully"
    assert body["data"]["id"] == 1
    assert body["data"]["name"] == "B"
    assert body["data"]["email"] == "b@x.com"
    assert _parse_ts(body["data"]["createdAt"]) == datetime(2024, 1, 15, tzinfo=timezone.utc)


def test_update_unknown_user_is_404(client, store):
    resp = client.put("/api/users/999", json={"name": "B", "email": "b@x.com"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "User with id 999 not found"
    assert store.count() == 2


def test_update_checks_fields_before_existence(client):
    resp = client.put("/api/users/999", json={"name": "B"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Name and email are required"


def test_delete_user(client):
    resp = client.delete("/api/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "User with id 1 deleted successfully"}

    again = client.delete("/api/users/1")
    assert again.status_code == 404
    assert again.json()["message"] == "User with id 1 not found"


def test_crud_scenario(client):
    created = client.post("/api/users", json={"name": "A", "email": "a@x.com"})
    assert created.status_code == 201
    assert created.json()["data"]["id"] == 3

    listing = client.get("/api/users")
    assert listing.json()["count"] == 3

    updated = client.put("/api/users/3", json={"name": "B", "email": "b@x.com"})
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "B"

    assert client.delete("/api/users/1").status_code == 200
    assert client.get("/api/users/1").status_code == 404

    missing = client.get("/api/users/999")
    assert missing.status_code == 404
    assert missing.json()["message"] == "User with id 999 not found"

    empty = client.post("/api/users", json={})
    assert empty.status_code == 400
    assert empty.json()["message"] == "Name and email are required"


def test_apps_do_not_share_stores(client):
    client.post("/api/users", json={"name": "A", "email": "a@x.com"})
    other = TestClient(create_app())
    assert other.get("/api/users").json()["count"] == 2


class BrokenStore(UserStore):
    def get_all(self):
        raise RuntimeError("store exploded")

    def get_by_id(self, user_id):
        raise RuntimeError("store exploded")

    def create(self, name, email):
        raise RuntimeError("store exploded")

    def update(self, user_id, name, email):
        raise RuntimeError("store exploded")

    def delete(self, user_id):
        raise RuntimeError("store exploded")


@pytest.mark.parametrize(
    "method, path, payload, message",
    [
        ("GET", "/api/users", None, "Error fetching users"),
        ("GET", "/api/users/1", None, "Error fetching user"),
        ("POST", "/api/users", {"name": "A", "email": "a@x.com"}, "Error creating user"),
        ("PUT", "/api/users/1", {"name": "A", "email": "a@x.com"}, "Error updating user"),
        ("DELETE", "/api/users/1", None, "Error deleting user"),
    ],
)
def test_unexpected_faults_are_500_without_details(method, path, payload, message):
    client = TestClient(create_app(store=BrokenStore()))
    resp = client.request(method, path, json=payload)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": message}
    assert "exploded" not in resp.text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7", 7),
        ("  7", 7),
        ("+7", 7),
        ("-3", -3),
        ("12abc", 12),
        ("abc", None),
        ("", None),
        ("1.5", 1),
        ("0x1", 1),
        ("0XfF", 255),
        ("-0x10", -16),
        ("0x", None),
        ("0xg", None),
        ("9" * 400, float("inf")),
        ("9" * 5000, float("inf")),
        ("-" + "9" * 5000, float("-inf")),
    ],
)
def test_parse_user_id(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize(
    "parsed, expected",
    [(None, "NaN"), (float("inf"), "Infinity"), (float("-inf"), "-Infinity"), (42, "42")],
)
def test_format_user_id(parsed, expected):
    assert format_user_id(parsed) == expected


def test_hex_id_is_read_like_parse_int(client):
    resp = client.get("/api/users/0x1")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == 1


def test_oversized_id_is_404_not_500(client):
    resp = client.get("/api/users/" + "9" * 5000)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "User with id Infinity not found"}


def test_oversized_id_on_delete_is_404(client, store):
    resp = client.delete("/api/users/" + "9" * 5000)
    assert resp.status_code == 404
    assert store.count() == 2


def test_create_accepts_form_body(client, store):
    resp = client.post("/api/users", data={"name": "A", "email": "a@x.com"})
    assert resp.status_code == 201
    assert resp.json()["data"]["name"] == "A"
    assert store.get_by_id(3).email == "a@x.com"


def test_update_accepts_form_body(client):
    resp = client.put("/api/users/2", data={"name": "B", "email": "b@x.com"})
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == "b@x.com"


def test_form_body_missing_field_is_400(client, store):
    resp = client.post("/api/users", data={"name": "A"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Name and email are required"
    assert store.count() == 2


def test_json_array_body_is_400(client):
    resp = client.post("/api/users", json=[{"name": "A", "email": "a@x.com"}])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request body"


def test_created_at_uses_millisecond_utc_format(client):
    resp = client.post("/api/users", json={"name": "A", "email": "a@x.com"})
    created_at = resp.json()["data"]["createdAt"]
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", created_at)
