"""API tests for /users"""

import uuid


def test_create_user(client):
    resp = client.post("/users", json={"name": "A", "username": "a"})

    assert resp.status_code == 201
    body = resp.json()
    assert uuid.UUID(body["id"])
    assert body == {"id": body["id"], "name": "A", "username": "a", "pro": False, "todos": []}


def test_create_user_duplicate_username(client, create_user):
    create_user("a")

    resp = client.post("/users", json={"name": "Other", "username": "a"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Username already exists"}


def test_create_user_missing_field(client):
    resp = client.post("/users", json={"name": "A"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid request body."}


def test_get_user(client, create_user, create_todo):
    user = create_user("a")
    create_todo("a", title="first")

    resp = client.get(f"/users/{user['id']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "a"
    assert [t["title"] for t in body["todos"]] == ["first"]


def test_get_unknown_user(client):
    resp = client.get(f"/users/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert resp.json() == {"error": "user not found."}


def test_upgrade_to_pro(client, create_user):
    user = create_user("a")

    resp = client.patch(f"/users/{user['id']}/pro")
    assert resp.status_code == 200
    assert resp.json()["pro"] is True


def test_upgrade_twice_is_rejected(client, create_user):
    user = create_user("a")
    client.patch(f"/users/{user['id']}/pro")

    resp = client.patch(f"/users/{user['id']}/pro")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Pro plan is already activated."}
    assert client.get(f"/users/{user['id']}").json()["pro"] is True


def test_upgrade_unknown_user(client):
    resp = client.patch("/users/nope/pro")

    assert resp.status_code == 404
    assert resp.json() == {"error": "user not found."}


def test_unknown_route_uses_error_body(client):
    resp = client.get("/nowhere")

    assert resp.status_code == 404
    assert "error" in resp.json()


def test_health(client, settings):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": settings.app_version}
