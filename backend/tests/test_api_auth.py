"""API tests for /api/auth."""

from chirp.api.dependencies.services import get_upload_service
from chirp.api.main import app
from chirp.shared.services.upload_service import UploadService
from tests.conftest import PASSWORD, register

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_create_account(client):
    response = client.post(
        "/api/auth/create-account",
        json={
            "username": "alice",
            "fullname": "Alice",
            "email": "Alice@Example.com",
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "alice@example.com"
    assert "password" not in body and "password_hash" not in body


def test_create_account_duplicate(client, alice):
    response = client.post(
        "/api/auth/create-account",
        json={"username": "alice", "fullname": "A", "email": "x@example.com", "password": PASSWORD},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_create_account_validation(client):
    response = client.post(
        "/api/auth/create-account",
        json={"username": "abc", "fullname": "A", "email": "not-an-email", "password": "123"},
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in error["details"]["errors"]}
    assert {"body.username", "body.email", "body.password"} <= fields


def test_login_returns_token(client, alice):
    assert alice["token_type"] == "bearer"
    assert alice["expires_in"] == 90 * 24 * 60 * 60
    assert alice["user"]["username"] == "alice"


def test_login_wrong_password(client, alice):
    response = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


def test_me(client, alice):
    response = client.get("/api/auth/me", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["id"] == alice["user"]["id"]


def test_list_and_get_users(client, alice, bob):
    response = client.get("/api/auth/users", headers=alice["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["total"] == 2
    assert {u["username"] for u in body["data"]} == {"alice", "bobby"}

    response = client.get(f"/api/auth/users/{bob['user']['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["username"] == "bobby"


def test_get_user_malformed_id(client, alice):
    response = client.get("/api/auth/users/not-a-uuid", headers=alice["headers"])
    assert response.status_code == 400


def test_update_self(client, alice, bob):
    response = client.put(
        "/api/auth/users",
        json={"fullname": "Alice L.", "description": "hello"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert response.json()["fullname"] == "Alice L."

    response = client.put(
        "/api/auth/users", json={"username": "bobby"}, headers=alice["headers"]
    )
    assert response.status_code == 409

    response = client.put("/api/auth/users", json={}, headers=alice["headers"])
    assert response.status_code == 400

    response = client.put(
        "/api/auth/users", json={"username": "    "}, headers=alice["headers"]
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get("/api/auth/me", headers=alice["headers"]).json()["username"] == "alice"


def test_delete_and_restore(client, alice):
    response = client.delete("/api/auth/users", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get("/api/auth/me", headers=alice["headers"]).status_code == 401
    login = client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
    assert login.status_code == 401

    restored = client.post(
        "/api/auth/restore", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert restored.status_code == 200
    body = restored.json()
    assert body["user"]["id"] == alice["user"]["id"]
    assert body["user"]["username"] == "alice"

    headers = {"Authorization": f"Bearer {body['access_token']}"}
    assert client.get("/api/auth/me", headers=headers).status_code == 200


def test_restore_conflict_when_email_taken(client, alice):
    client.delete("/api/auth/users", headers=alice["headers"])
    register(client, "newcomer", email="alice@example.com")

    response = client.post(
        "/api/auth/restore", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert response.status_code == 409


def test_restore_conflict_when_username_taken(client, alice):
    client.delete("/api/auth/users", headers=alice["headers"])
    register(client, "alice", email="someone-else@example.com")

    response = client.post(
        "/api/auth/restore", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE PICTURE
# ═══════════════════════════════════════════════════════════════════════════════


def test_upload_profile_picture(client, alice):
    response = client.post(
        "/api/auth/users/profile-picture",
        files={"profilePicture": ("me.png", PNG_BYTES, "image/png")},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    path = response.json()["profile_picture"]
    assert path.startswith("/uploads/profilePicture-")
    assert path.endswith(".png")

    served = client.get(path)
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_upload_rejects_other_types(client, alice):
    response = client.post(
        "/api/auth/users/profile-picture",
        files={"profilePicture": ("anim.gif", b"GIF89a", "image/gif")},
        headers=alice["headers"],
    )
    assert response.status_code == 400


def test_upload_requires_file(client, alice):
    response = client.post("/api/auth/users/profile-picture", headers=alice["headers"])
    assert response.status_code == 400


def test_upload_size_limit(client, alice):
    app.dependency_overrides[get_upload_service] = lambda: UploadService(max_size=16)
    try:
        response = client.post(
            "/api/auth/users/profile-picture",
            files={"profilePicture": ("me.png", PNG_BYTES, "image/png")},
            headers=alice["headers"],
        )
    finally:
        app.dependency_overrides.pop(get_upload_service, None)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "File is too large"
