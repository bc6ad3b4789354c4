# tests/repositories/test_user_repository.py
"""Tests for app/repositories/user.py module."""

import pytest
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import UserValidationError
from app.managers.password_manager import verify_password
from app.repositories import UserRepository
from app.schemas import UserCreate


def _user(username: str | None = "root", password: str | None = "sekret") -> UserCreate:
    return UserCreate(
        username=username,
        name="Superuser",
        password=SecretStr(password) if password is not None else None,
    )


class TestValidateNewUser:
    """Tests for the ordered field rules."""

    @pytest.mark.parametrize(
        ("user", "message"),
        [
            (_user(username=None, password=None), "password missing"),
            (_user(username="to", password=""), "password missing"),
            (_user(username="to", password="pw"), "`password` length must be 3 at least"),
            (
                _user(username=None),
                "User validation failed: username: Path `username` is required.",
            ),
            (
                _user(username="to"),
                "User validation failed: username: Path `username` (`to`) is shorter than "
                "the minimum allowed length (3).",
            ),
        ],
    )
    def test_first_failing_rule_is_reported(self, user: UserCreate, message: str) -> None:
        with pytest.raises(UserValidationError) as exc_info:
            UserRepository.validate_new_user(user)
        assert exc_info.value.detail == message

    def test_minimum_lengths_are_inclusive(self) -> None:
        assert UserRepository.validate_new_user(_user(username="abc", password="xyz")) == (
            "abc",
            "xyz",
        )


class TestCreate:
    """Tests for UserRepository.create."""

    @pytest.mark.asyncio
    async def test_stores_hash_not_password(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(_user())

        assert user.password_hash != "sekret"
        assert await verify_password("sekret", user.password_hash)
        assert user.blogs == []

    @pytest.mark.asyncio
    async def test_duplicate_username(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        await repo.create(_user())

        with pytest.raises(UserValidationError) as exc_info:
            await repo.create(_user())

        assert exc_info.value.detail == (
            "User validation failed: username: Error, expected `username` to be unique. "
            "Value: `root`"
        )

    @pytest.mark.asyncio
    async def test_usernames_are_case_sensitive(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        await repo.create(_user(username="root"))
        await repo.create(_user(username="Root"))

        assert await repo.count() == 2
        found = await repo.get_by_username("Root")
        assert found is not None
        assert found.username == "Root"

    @pytest.mark.asyncio
    async def test_get_by_username_missing(self, session: AsyncSession) -> None:
        assert await UserRepository(session).get_by_username("nobody") is None
