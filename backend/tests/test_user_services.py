"""Tests for AuthService and UserService (registration, login, logical delete, restore)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from chirp.shared.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateResourceError,
    UserNotFoundError,
)
from chirp.shared.realtime import ConnectionRegistry
from chirp.shared.schemas.user import UserCreate, UserUpdate
from chirp.shared.services.auth_service import AuthService
from chirp.shared.services.user_service import UserService
from tests.conftest import PASSWORD


# ═══════════════════════════════════════════════════════════════════════════════
# REGISTRATION & LOGIN
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_hashes_password(session, make_user):
    user = await make_user("alice")
    assert user.password_hash != PASSWORD
    assert user.email == "alice@example.com"
    assert user.deleted_at is None


@pytest.mark.asyncio
async def test_register_rejects_duplicate_email_and_username(session, make_user):
    await make_user("alice")
    auth = AuthService(session)

    with pytest.raises(DuplicateResourceError, match="Email"):
        await auth.register_user(
            UserCreate(username="other", fullname="O", email="ALICE@example.com", password=PASSWORD)
        )
    with pytest.raises(DuplicateResourceError, match="Username"):
        await auth.register_user(
            UserCreate(username="alice", fullname="A", email="new@example.com", password=PASSWORD)
        )


@pytest.mark.asyncio
async def test_login_issues_token_for_user(session, make_user):
    user = await make_user("alice")
    auth = AuthService(session)

    logged_in, token, expires_in = await auth.login_user("alice@example.com", PASSWORD)

    assert logged_in.id == user.id
    assert expires_in == 90 * 24 * 60 * 60
    assert (await auth.resolve_token_user(token)).id == user.id


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(session, make_user):
    await make_user("alice")
    auth = AuthService(session)

    with pytest.raises(AuthenticationError) as wrong_password:
        await auth.login_user("alice@example.com", "not-the-password")
    with pytest.raises(AuthenticationError) as unknown_email:
        await auth.login_user("nobody@example.com", PASSWORD)

    assert wrong_password.value.message == unknown_email.value.message


@pytest.mark.asyncio
async def test_garbage_token_rejected(session):
    with pytest.raises(AuthenticationError):
        await AuthService(session).resolve_token_user("garbage")


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_update_profile(session, make_user):
    user = await make_user("alice")
    service = UserService(session)

    updated = await service.update_user(
        user, UserUpdate(fullname="Alice Liddell", description="Down the rabbit hole")
    )

    assert updated.fullname == "Alice Liddell"
    assert updated.description == "Down the rabbit hole"
    assert updated.username == "alice"


@pytest.mark.asyncio
async def test_update_password_is_rehashed(session, make_user):
    user = await make_user("alice")
    await UserService(session).update_user(user, UserUpdate(password="brand-new-pass"))

    auth = AuthService(session)
    await auth.login_user("alice@example.com", "brand-new-pass")
    with pytest.raises(AuthenticationError):
        await auth.login_user("alice@example.com", PASSWORD)


@pytest.mark.asyncio
async def test_update_rejects_taken_username(session, make_user):
    user = await make_user("alice")
    await make_user("bobby")

    with pytest.raises(DuplicateResourceError):
        await UserService(session).update_user(user, UserUpdate(username="bobby"))


def test_empty_update_is_invalid():
    with pytest.raises(ValueError):
        UserUpdate()


@pytest.mark.parametrize("field", ["username", "fullname"])
def test_blank_update_is_invalid(field):
    with pytest.raises(ValueError):
        UserUpdate(**{field: "    "})


def test_update_text_is_stripped_before_length_check():
    assert UserUpdate(username="  alice2  ").username == "alice2"
    with pytest.raises(ValueError):
        UserUpdate(username="   ab   ")


# ═══════════════════════════════════════════════════════════════════════════════
# LOGICAL DELETE & RESTORE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_logical_delete_frees_email_and_username(session, make_user):
    user = await make_user("alice")
    service = UserService(session)

    await service.delete_user(user)

    assert user.is_deleted
    assert user.original_email == "alice@example.com"
    assert user.original_username == "alice"
    assert user.email.startswith("deleted_") and user.email.endswith("@deleted.invalid")
    with pytest.raises(UserNotFoundError):
        await service.get_user(user.id)
    with pytest.raises(AuthenticationError):
        await AuthService(session).login_user("alice@example.com", PASSWORD)

    # Originals can be registered again
    replacement = await make_user("alice")
    assert replacement.id != user.id


@pytest.mark.asyncio
async def test_deleted_user_token_stops_working(session, make_user):
    user = await make_user("alice")
    token, _ = AuthService.issue_token(user)

    await UserService(session).delete_user(user)

    with pytest.raises(AuthenticationError):
        await AuthService(session).resolve_token_user(token)


@pytest.mark.asyncio
async def test_restore_brings_account_back(session, make_user):
    user = await make_user("alice")
    service = UserService(session)
    await service.delete_user(user)

    restored = await service.restore_user("alice@example.com", PASSWORD)

    assert restored.id == user.id
    assert restored.email == "alice@example.com"
    assert restored.username == "alice"
    assert restored.deleted_at is None
    assert restored.original_email is None


@pytest.mark.asyncio
async def test_restore_requires_password(session, make_user):
    user = await make_user("alice")
    service = UserService(session)
    await service.delete_user(user)

    with pytest.raises(AuthenticationError):
        await service.restore_user("alice@example.com", "wrong-password")


@pytest.mark.asyncio
async def test_restore_conflicts_when_email_reused(session, make_user):
    user = await make_user("alice")
    service = UserService(session)
    await service.delete_user(user)
    await make_user("newcomer", email="alice@example.com")

    with pytest.raises(ConflictError):
        await service.restore_user("alice@example.com", PASSWORD)


@pytest.mark.asyncio
async def test_list_users_skips_deleted(session, make_user):
    alice = await make_user("alice")
    await make_user("bobby")
    service = UserService(session)
    await service.delete_user(alice)

    users, total = await service.list_users()

    assert total == 1
    assert [u.username for u in users] == ["bobby"]


@pytest.mark.asyncio
async def test_delete_closes_open_sockets(session, make_user):
    user = await make_user("alice")
    registry = ConnectionRegistry()
    websocket = MagicMock()
    websocket.close = AsyncMock()
    await registry.connect(str(user.id), websocket)

    await UserService(session, registry=registry).delete_user(user)

    websocket.close.assert_awaited_once_with(code=1008)
    assert not registry.is_connected(str(user.id))


@pytest.mark.asyncio
async def test_restore_conflicts_when_username_reused(session, make_user):
    user = await make_user("alice")
    service = UserService(session)
    await service.delete_user(user)
    await make_user("alice", email="other@example.com")

    with pytest.raises(ConflictError, match="username"):
        await service.restore_user("alice@example.com", PASSWORD)
    assert user.is_deleted


@pytest.mark.asyncio
async def test_restore_picks_account_matching_password(session, make_user):
    auth = AuthService(session)
    service = UserService(session)
    first = await make_user("first", email="shared@example.com")
    await service.delete_user(first)
    second = await auth.register_user(
        UserCreate(
            username="second",
            fullname="Second",
            email="shared@example.com",
            password="another-pass",
        )
    )
    await service.delete_user(second)

    restored = await service.restore_user("shared@example.com", PASSWORD)

    assert restored.id == first.id
    assert restored.username == "first"
    assert second.is_deleted
    with pytest.raises(AuthenticationError):
        await service.restore_user("shared@example.com", "wrong-password")
