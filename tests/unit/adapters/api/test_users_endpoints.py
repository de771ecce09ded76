import uuid

import pytest


def _create(client, headers, name="Bob", email="bob@x.com", password="secret1"):
    return client.post(
        "/api/v1/users",
        json={"name": name, "email": email, "password": password},
        headers=headers,
    )


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/v1/users"),
        ("post", "/api/v1/users"),
        ("get", f"/api/v1/users/{uuid.uuid4().hex}"),
        ("put", f"/api/v1/users/{uuid.uuid4().hex}"),
        ("delete", f"/api/v1/users/{uuid.uuid4().hex}"),
    ],
)
def test_user_routes_require_token(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 401
    assert response.json() == {"detail": "Authorization header required"}


def test_create_user(client, auth_headers):
    # Act
    response = _create(client, auth_headers)

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Bob"
    assert body["email"] == "bob@x.com"
    assert len(body["id"]) == 32
    assert "hashed_password" not in body


def test_created_user_can_log_in(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.post("/api/v1/auth/login", json={"email": "bob@x.com", "password": "secret1"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == created["id"]


def test_create_user_duplicate_email(client, auth_headers):
    response = _create(client, auth_headers, email="alice@x.com")

    assert response.status_code == 409


def test_list_users(client, auth_headers):
    _create(client, auth_headers)

    response = client.get("/api/v1/users", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert {u["email"] for u in body["users"]} == {"alice@x.com", "bob@x.com"}


def test_get_user(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.get(f"/api/v1/users/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == created


def test_get_user_not_found(client, auth_headers):
    response = client.get(f"/api/v1/users/{uuid.uuid4().hex}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"detail": "user not found"}


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_malformed_user_id(client, auth_headers, method):
    response = client.request(method, "/api/v1/users/not-a-valid-id", headers=auth_headers, json={})

    assert response.status_code == 400
    assert response.json() == {"detail": "invalid user ID"}


def test_update_user(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.put(
        f"/api/v1/users/{created['id']}",
        json={"name": "Robert", "email": "robert@x.com"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Robert"
    assert body["email"] == "robert@x.com"


def test_update_user_partial(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.put(
        f"/api/v1/users/{created['id']}",
        json={"name": "Robert"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["email"] == "bob@x.com"


def test_update_user_to_taken_email(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.put(
        f"/api/v1/users/{created['id']}",
        json={"email": "alice@x.com"},
        headers=auth_headers,
    )

    assert response.status_code == 409


def test_update_user_rejects_invalid_email(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.put(
        f"/api/v1/users/{created['id']}",
        json={"email": "not-an-email"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_update_user_not_found(client, auth_headers):
    response = client.put(
        f"/api/v1/users/{uuid.uuid4().hex}",
        json={"name": "Ghost"},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_delete_user(client, auth_headers):
    created = _create(client, auth_headers).json()

    response = client.delete(f"/api/v1/users/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert client.get(f"/api/v1/users/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_user_not_found(client, auth_headers):
    response = client.delete(f"/api/v1/users/{uuid.uuid4().hex}", headers=auth_headers)

    assert response.status_code == 404


@pytest.mark.parametrize(
    "spelling",
    [
        lambda hex_id: str(uuid.UUID(hex=hex_id)),
        lambda hex_id: "{" + hex_id + "}",
        lambda hex_id: "urn:uuid:" + str(uuid.UUID(hex=hex_id)),
        lambda hex_id: hex_id.upper(),
    ],
    ids=["hyphenated", "braces", "urn", "uppercase"],
)
def test_user_id_has_a_single_spelling(client, auth_headers, spelling):
    created = _create(client, auth_headers).json()

    response = client.get(f"/api/v1/users/{spelling(created['id'])}", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"detail": "invalid user ID"}
