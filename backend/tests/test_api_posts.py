"""API tests for /api/posts and likes."""

import uuid

import pytest

from tests.conftest import register


@pytest.fixture
def post(client, alice):
    response = client.post(
        "/api/posts",
        json={"header": "Hello world", "content": "First post on Chirp"},
        headers=alice["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_post(client, alice, post):
    assert post["user_id"] == alice["user"]["id"]
    assert post["author"]["username"] == "alice"
    assert post["image"] is None


def test_create_post_requires_auth(client):
    response = client.post("/api/posts", json={"header": "Hello", "content": "World"})
    assert response.status_code == 401


def test_create_post_validation(client, alice):
    response = client.post(
        "/api/posts", json={"header": "Hi", "content": ""}, headers=alice["headers"]
    )
    assert response.status_code == 400


def test_list_and_get(client, bob, post):
    listing = client.get("/api/posts", headers=bob["headers"])
    assert listing.status_code == 200
    assert [p["id"] for p in listing.json()["data"]] == [post["id"]]

    single = client.get(f"/api/posts/{post['id']}", headers=bob["headers"])
    assert single.status_code == 200
    assert single.json()["header"] == "Hello world"


def test_get_missing_post(client, alice):
    response = client.get(f"/api/posts/{uuid.uuid4()}", headers=alice["headers"])
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_malformed_post_id(client, alice):
    response = client.get("/api/posts/123", headers=alice["headers"])
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_post(client, alice, post):
    response = client.put(
        f"/api/posts/{post['id']}",
        json={"content": "Edited and long enough", "image": "https://cdn.example.com/a.png"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["content"] == "Edited and long enough"
    assert body["image"] == "https://cdn.example.com/a.png"
    assert body["header"] == "Hello world"


@pytest.mark.parametrize(
    "payload",
    [{}, {"header": "ab"}, {"content": "short"}, {"image": "ftp://example.com/a.png"}],
)
def test_update_post_rules(client, alice, post, payload):
    response = client.put(f"/api/posts/{post['id']}", json=payload, headers=alice["headers"])
    assert response.status_code == 400


def test_update_and_delete_by_other_user(client, bob, post):
    response = client.put(
        f"/api/posts/{post['id']}", json={"header": "Mine now"}, headers=bob["headers"]
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"

    assert client.delete(f"/api/posts/{post['id']}", headers=bob["headers"]).status_code == 403


def test_delete_post_with_likes(client, alice, bob, post):
    client.post(f"/api/posts/{post['id']}/likes", headers=bob["headers"])

    response = client.delete(f"/api/posts/{post['id']}", headers=alice["headers"])
    assert response.status_code == 200

    assert client.get(f"/api/posts/{post['id']}", headers=alice["headers"]).status_code == 404
    assert client.get(f"/api/posts/{post['id']}/likes", headers=alice["headers"]).status_code == 404


def test_like_flow(client, alice, bob, post):
    url = f"/api/posts/{post['id']}/likes"

    first = client.post(url, headers=bob["headers"])
    assert first.status_code == 201
    assert first.json()["user"]["username"] == "bobby"

    second = client.post(url, headers=bob["headers"])
    assert second.status_code == 409

    likes = client.get(url, headers=alice["headers"]).json()
    assert likes["count"] == 1
    assert likes["likes"][0]["user_id"] == bob["user"]["id"]

    assert client.delete(url, headers=bob["headers"]).status_code == 200
    assert client.delete(url, headers=bob["headers"]).status_code == 404
    assert client.get(url, headers=alice["headers"]).json()["count"] == 0


def test_like_creates_notification_for_author(client, alice, bob, post):
    client.post(f"/api/posts/{post['id']}/likes", headers=bob["headers"])

    notifications = client.get("/api/notifications", headers=alice["headers"]).json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "newLike"
    assert notifications[0]["is_read"] is False


def test_like_missing_post(client, bob):
    response = client.post(f"/api/posts/{uuid.uuid4()}/likes", headers=bob["headers"])
    assert response.status_code == 404


def test_post_of_deleted_author_is_gone(client, alice, bob, post):
    assert client.delete("/api/auth/users", headers=alice["headers"]).status_code == 200

    url = f"/api/posts/{post['id']}"
    assert client.get(url, headers=bob["headers"]).status_code == 404
    assert client.post(f"{url}/likes", headers=bob["headers"]).status_code == 404
    listing = client.get("/api/posts", headers=bob["headers"]).json()
    assert post["id"] not in [p["id"] for p in listing["data"]]


def test_like_notification_with_long_names_and_header(client):
    author = register(client, "a" * 255, email="author@example.com")
    liker = register(client, "b" * 255, email="liker@example.com")
    created = client.post(
        "/api/posts",
        json={"header": "h" * 255, "content": "A long header on this post"},
        headers=author["headers"],
    )
    assert created.status_code == 201, created.text

    response = client.post(f"/api/posts/{created.json()['id']}/likes", headers=liker["headers"])
    assert response.status_code == 201

    [notification] = client.get("/api/notifications", headers=author["headers"]).json()
    assert len(notification["content"]) <= 500
