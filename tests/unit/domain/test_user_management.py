import uuid
from unittest.mock import AsyncMock

import pytest

from userhub.core.exceptions import DatabaseError, UserAlreadyExistsError, UserNotFoundError
from userhub.domain.entities.user import User
from userhub.domain.interfaces.repositories import IUserRepository
from userhub.domain.services.users import UserManagementService


@pytest.mark.asyncio
async def test_create_user_can_log_in(user_service, auth_service):
    # Act
    profile = await user_service.create_user("Bob", "bob@x.com", "secret1")

    # Assert
    login = await auth_service.login("bob@x.com", "secret1")
    assert login.user.id == profile.id
    assert not hasattr(profile, "hashed_password")


@pytest.mark.asyncio
async def test_create_user_duplicate_email(user_service):
    await user_service.create_user("Alice", "alice@x.com", "secret1")

    with pytest.raises(UserAlreadyExistsError):
        await user_service.create_user("Other", "alice@x.com", "secret1")


@pytest.mark.asyncio
async def test_get_user(user_service):
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")

    fetched = await user_service.get_user(uuid.UUID(hex=created.id))

    assert fetched == created


@pytest.mark.asyncio
async def test_get_user_missing(user_service):
    with pytest.raises(UserNotFoundError):
        await user_service.get_user(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_users_reports_total(user_service):
    await user_service.create_user("Alice", "alice@x.com", "secret1")
    await user_service.create_user("Bob", "bob@x.com", "secret1")

    result = await user_service.list_users()

    assert result.total == 2
    assert {u.email for u in result.users} == {"alice@x.com", "bob@x.com"}


@pytest.mark.asyncio
async def test_list_users_empty(user_service):
    result = await user_service.list_users()

    assert result.users == []
    assert result.total == 0


@pytest.mark.asyncio
async def test_update_user_name_and_email(user_service, auth_service):
    # Arrange
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")

    # Act
    updated = await user_service.update_user(
        uuid.UUID(hex=created.id), name="Alice B", email="alice@new.example"
    )

    # Assert
    assert updated.id == created.id
    assert updated.name == "Alice B"
    assert updated.email == "alice@new.example"
    login = await auth_service.login("alice@new.example", "secret1")
    assert login.user.id == created.id


@pytest.mark.asyncio
async def test_update_user_skips_empty_fields(user_service):
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")

    updated = await user_service.update_user(uuid.UUID(hex=created.id), name="", email=None)

    assert updated.name == "Alice"
    assert updated.email == "alice@x.com"


@pytest.mark.asyncio
async def test_update_user_to_own_email_is_allowed(user_service):
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")

    updated = await user_service.update_user(uuid.UUID(hex=created.id), email="alice@x.com")

    assert updated.email == "alice@x.com"


@pytest.mark.asyncio
async def test_update_user_to_taken_email(user_service):
    await user_service.create_user("Alice", "alice@x.com", "secret1")
    bob = await user_service.create_user("Bob", "bob@x.com", "secret1")

    with pytest.raises(UserAlreadyExistsError):
        await user_service.update_user(uuid.UUID(hex=bob.id), email="alice@x.com")

    unchanged = await user_service.get_user(uuid.UUID(hex=bob.id))
    assert unchanged.email == "bob@x.com"


@pytest.mark.asyncio
async def test_update_user_missing(user_service):
    with pytest.raises(UserNotFoundError):
        await user_service.update_user(uuid.uuid4(), name="Ghost")


@pytest.mark.asyncio
async def test_delete_user(user_service):
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")
    user_id = uuid.UUID(hex=created.id)

    await user_service.delete_user(user_id)

    with pytest.raises(UserNotFoundError):
        await user_service.get_user(user_id)
    assert await user_service.count_users() == 0


@pytest.mark.asyncio
async def test_delete_user_missing(user_service):
    with pytest.raises(UserNotFoundError):
        await user_service.delete_user(uuid.uuid4())


@pytest.mark.asyncio
async def test_deleted_email_can_register_again(user_service):
    created = await user_service.create_user("Alice", "alice@x.com", "secret1")
    await user_service.delete_user(uuid.UUID(hex=created.id))

    again = await user_service.create_user("Alice", "alice@x.com", "secret1")

    assert again.id != created.id


@pytest.mark.asyncio
async def test_count_users(user_service):
    assert await user_service.count_users() == 0

    await user_service.create_user("Alice", "alice@x.com", "secret1")
    await user_service.create_user("Bob", "bob@x.com", "secret1")

    assert await user_service.count_users() == 2


@pytest.mark.asyncio
async def test_update_email_lookup_failure_defers_to_repository(auth_service):
    # Arrange
    user = User.create("Alice", "alice@x.com", "$2b$04$hash")
    repository = AsyncMock(spec=IUserRepository)
    repository.get_by_id.return_value = user
    repository.get_by_email.side_effect = DatabaseError("transient")
    service = UserManagementService(repository, auth_service)

    # Act
    updated = await service.update_user(user.id, email="alice@new.com")

    # Assert
    assert updated.email == "alice@new.com"
    repository.update.assert_awaited_once()
    assert repository.update.await_args.args[0].email == "alice@new.com"
