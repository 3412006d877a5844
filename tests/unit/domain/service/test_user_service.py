"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from quill.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from quill.domain.service import UserService
from quill.domain.value import UserId, UserRole
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PASSWORD = "correct horse"


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_normalises_email_and_hashes_password(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("alice", "  Alice@Example.COM ", PASSWORD)

        assert str(user.username) == "alice"
        assert user.email == "alice@example.com"
        assert user.role == UserRole.USER
        assert user.password_hash != PASSWORD
        assert user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_register_admin(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("root", "root@example.com", PASSWORD, UserRole.ADMIN)

        assert user.role == UserRole.ADMIN

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "email", "password", "message"),
        [
            ("al", "al@example.com", PASSWORD, "Username must be"),
            ("has space", "x@example.com", PASSWORD, "Username must be"),
            ("bob", "not-an-email", PASSWORD, "valid email"),
            ("bob", "bob@example.com", "short", "at least 8"),
            ("bob", "bob@example.com", "x" * 73, "at most 72"),
        ],
    )
    async def test_invalid_input(self, unit_env, username, email, password, message):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match=message):
            await service.register(username, email, password)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(ConflictError, match="Email"):
            await service.register("alice2", "ALICE@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(ConflictError, match="Username"):
            await service.register("alice", "other@example.com", PASSWORD)


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        service = await unit_env.get(UserService)
        registered = await service.register("alice", "alice@example.com", PASSWORD)

        user = await service.authenticate("ALICE@example.com", PASSWORD)

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await service.authenticate("alice@example.com", "wrong password")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await service.authenticate("nobody@example.com", PASSWORD)

        assert str(wrong_password.value) == str(unknown_email.value)


class TestChangePassword:
    """Tests for change_password."""

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("alice", "alice@example.com", PASSWORD)

        await service.change_password(user.id, PASSWORD, "battery staple")

        assert (await service.authenticate("alice@example.com", "battery staple")).id == user.id
        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("alice@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("alice", "alice@example.com", PASSWORD)

        with pytest.raises(InvalidCredentialsError, match="Current password is incorrect"):
            await service.change_password(user.id, "guess", "battery staple")

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.change_password(UserId(uuid4()), PASSWORD, "battery staple")


class TestGetUsersByIds:
    """Tests for get_users_by_ids."""

    @pytest.mark.asyncio
    async def test_missing_ids_are_absent(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("alice", "alice@example.com", PASSWORD)
        missing = UserId(uuid4())

        users = await service.get_users_by_ids([user.id, missing, user.id])

        assert set(users) == {user.id}

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        service = await unit_env.get(UserService)

        assert await service.get_users_by_ids([]) == {}
