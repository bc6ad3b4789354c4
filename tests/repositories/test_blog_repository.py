# tests/repositories/test_blog_repository.py
"""Tests for app/repositories/blog.py module."""

from uuid import uuid4

import pytest
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import BlogValidationError, RecordNotFoundError
from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.schemas import BlogCreate, BlogUpdate, UserCreate


@pytest.fixture
async def owner(session: AsyncSession) -> UserDB:
    return await UserRepository(session).create(
        UserCreate(username="root", name="Superuser", password=SecretStr("sekret")),
    )


class TestCreate:
    """Tests for BlogRepository.create."""

    @pytest.mark.asyncio
    async def test_links_owner(self, session: AsyncSession, owner: UserDB) -> None:
        blog = await BlogRepository(session).create(
            BlogCreate(title="Type wars", author="Robert C. Martin", url="http://x"),
            owner=owner,
        )

        assert blog.user_id == owner.id
        assert blog.user is owner
        assert blog in owner.blogs

    @pytest.mark.asyncio
    async def test_likes_default_to_zero(self, session: AsyncSession, owner: UserDB) -> None:
        blog = await BlogRepository(session).create(BlogCreate(title="t"), owner=owner)
        assert blog.likes == 0

    @pytest.mark.asyncio
    async def test_title_or_url_required(self, session: AsyncSession, owner: UserDB) -> None:
        with pytest.raises(BlogValidationError):
            await BlogRepository(session).create(BlogCreate(author="A", likes=3), owner=owner)

    @pytest.mark.asyncio
    async def test_empty_strings_count_as_missing(
        self,
        session: AsyncSession,
        owner: UserDB,
    ) -> None:
        with pytest.raises(BlogValidationError):
            await BlogRepository(session).create(BlogCreate(title="", url=""), owner=owner)


class TestQueries:
    """Tests for reads, updates and deletes."""

    @pytest.mark.asyncio
    async def test_get_all_in_creation_order(self, session: AsyncSession, owner: UserDB) -> None:
        repo = BlogRepository(session)
        for title in ("one", "two", "three"):
            await repo.create(BlogCreate(title=title), owner=owner)

        assert [blog.title for blog in await repo.get_all()] == ["one", "two", "three"]
        assert [blog.title for blog in await repo.get_all(skip=1, limit=1)] == ["two"]

    @pytest.mark.asyncio
    async def test_rapid_inserts_keep_creation_order(
        self,
        session: AsyncSession,
        owner: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        titles = [f"blog {i}" for i in range(50)]
        for title in titles:
            await repo.create(BlogCreate(title=title), owner=owner)

        blogs = await repo.get_all()
        assert [blog.title for blog in blogs] == titles
        assert len({blog.created_at for blog in blogs}) == len(titles)

    @pytest.mark.asyncio
    async def test_get_or_raise_missing(self, session: AsyncSession) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            await BlogRepository(session).get_or_raise(uuid4())
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail.startswith("Blog with ID")

    @pytest.mark.asyncio
    async def test_update_only_changes_given_fields(
        self,
        session: AsyncSession,
        owner: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        blog = await repo.create(BlogCreate(title="t", url="u", likes=1), owner=owner)

        updated = await repo.update_blog(blog, BlogUpdate(likes=2))

        assert updated.likes == 2
        assert updated.title == "t"
        assert updated.url == "u"

    @pytest.mark.asyncio
    async def test_delete(self, session: AsyncSession, owner: UserDB) -> None:
        repo = BlogRepository(session)
        blog = await repo.create(BlogCreate(title="t"), owner=owner)

        assert await repo.delete(blog.id) is True
        assert await repo.delete(blog.id) is False
        assert await repo.count() == 0
