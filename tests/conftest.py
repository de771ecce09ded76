import pytest
from fastapi.testclient import TestClient

from userhub.core.application import create_application
from userhub.core.config.settings import Settings
from userhub.domain.services.auth import (
    PasswordHasher,
    TokenConfig,
    TokenService,
    UserAuthenticationService,
)
from userhub.domain.services.users import UserManagementService
from userhub.infrastructure.repositories.memory_user_repository import InMemoryUserRepository

TEST_SECRET = "test-signing-secret-0123456789abcdef"
# Lowest bcrypt cost passlib accepts; keeps the suite fast.
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher():
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_service(user_repository):
    return TokenService(TokenConfig(secret=TEST_SECRET), user_repository)


@pytest.fixture
def auth_service(user_repository, password_hasher, token_service):
    return UserAuthenticationService(user_repository, password_hasher, token_service)


@pytest.fixture
def user_service(user_repository, auth_service):
    return UserManagementService(user_repository, auth_service)


@pytest.fixture
def test_settings():
    return Settings(
        APP_ENV="test",
        JWT_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=TEST_BCRYPT_ROUNDS,
        STORAGE_BACKEND="memory",
        USER_COUNT_LOG_INTERVAL_SECONDS=0,
        LOG_JSON=False,
    )


@pytest.fixture
def app(test_settings, user_repository):
    return create_application(test_settings, user_repository)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client):
    """Registers a user through the API and returns the response JSON."""

    def _register(name="Alice", email="alice@x.com", password="secret1"):
        response = client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(client, register):
    """Registers Alice, logs in as Alice and returns bearer headers."""
    register()
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "alice@x.com", "password": "secret1"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
