import re
import uuid


def _email():
    return f"user_{uuid.uuid4().hex[:8]}@example.com"


def _create(client, **fields):
    body = {"name": "Ann", "email": _email()}
    body.update(fields)
    r = client.post("/users", json=body)
    assert r.status_code == 201
    return r.json()["data"]


def test_create_user_echoes_input(client):
    email = _email()
    body = {"name": "Ann", "email": email, "age": 31, "phone": "555-0100", "address": "1 Main St"}
    r = client.post("/users", json=body)
    assert r.status_code == 201
    payload = r.json()
    assert payload["success"] is True
    assert payload["message"] == "Data inserted successfully"
    data = payload["data"]
    for key, value in body.items():
        assert data[key] == value
    assert isinstance(data["id"], int)
    assert data["created_at"]
    assert data["updated_at"]


def test_create_user_optional_fields_default_to_null(client):
    data = _create(client)
    assert data["age"] is None
    assert data["phone"] is None
    assert data["address"] is None


def test_duplicate_email_is_a_store_error(client):
    email = _email()
    _create(client, email=email)

    r = client.post("/users", json={"name": "Bob", "email": email})
    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert "unique" in body["message"].lower()
    assert "data" not in body

    r = client.get("/users")
    assert len(r.json()["data"]) == 1


def test_list_users_empty(client):
    r = client.get("/users")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Users retrieved successfully", "data": []}


def test_list_users(client):
    first = _create(client, name="Ann")
    second = _create(client, name="Bob")

    r = client.get("/users")
    assert r.status_code == 200
    ids = {u["id"] for u in r.json()["data"]}
    assert ids == {first["id"], second["id"]}


def test_get_user_returns_a_list(client):
    user = _create(client, age=40)

    r = client.get(f"/users/{user['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Users retrieved successfully"
    assert isinstance(body["data"], list)
    assert len(body["data"]) == 1
    assert body["data"][0]["id"] == user["id"]
    assert body["data"][0]["age"] == 40


def test_get_missing_user(client):
    r = client.get("/users/999")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "User not found"}


def test_update_user(client):
    user = _create(client)
    new_email = _email()

    r = client.put(f"/users/{user['id']}", json={"name": "Ann B", "email": new_email, "age": 32})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Users updated successfully"
    assert body["data"]["id"] == user["id"]
    assert body["data"]["name"] == "Ann B"
    assert body["data"]["email"] == new_email
    assert body["data"]["age"] == 32


def test_update_is_a_full_replace(client):
    user = _create(client, age=30, phone="555-0100", address="1 Main St")

    r = client.put(f"/users/{user['id']}", json={"name": user["name"], "email": user["email"]})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["age"] is None
    assert data["phone"] is None
    assert data["address"] is None

    stored = client.get(f"/users/{user['id']}").json()["data"][0]
    assert stored["phone"] is None
    assert stored["age"] is None


def test_update_does_not_touch_updated_at(client):
    user = _create(client)

    r = client.put(f"/users/{user['id']}", json={"name": "Changed", "email": user["email"]})
    assert r.status_code == 200
    assert r.json()["data"]["updated_at"] == user["updated_at"]


def test_update_missing_user(client):
    r = client.put("/users/999", json={"name": "Nobody", "email": _email()})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "User not found"}


def test_update_to_taken_email(client):
    first = _create(client)
    second = _create(client)

    r = client.put(f"/users/{second['id']}", json={"name": "Bob", "email": first["email"]})
    assert r.status_code == 500
    assert r.json()["success"] is False

    # the failed statement left the row alone
    stored = client.get(f"/users/{second['id']}").json()["data"][0]
    assert stored["email"] == second["email"]


def test_delete_user(client):
    user = _create(client)

    r = client.delete(f"/users/{user['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Users deleted successfully", "data": None}

    r = client.get(f"/users/{user['id']}")
    assert r.status_code == 404


def test_delete_missing_user(client):
    r = client.delete("/users/999")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "User not found"}


def test_timestamps_are_utc_iso(client):
    user = _create(client)
    for key in ("created_at", "updated_at"):
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", user[key])


def test_unbindable_age_is_a_store_error(client):
    r = client.post("/users", json={"name": "Ann", "email": _email(), "age": 10**20})
    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert "too large" in body["message"]

    assert client.get("/users").json()["data"] == []


def test_unbindable_id_is_a_store_error(client):
    r = client.get(f"/users/{10**25}")
    assert r.status_code == 500
    assert "too large" in r.json()["message"]
