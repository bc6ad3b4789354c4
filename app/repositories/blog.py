"""Blog repository for database operations."""

from typing import Any

from app.errors.validation import BlogValidationError
from app.models.blog import BlogDB
from app.models.user import UserDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Blogs are listed in creation order and always linked to their owner.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, owner: UserDB) -> BlogDB:
        """
        Create a new blog owned by ``owner``.

        Args:
            blog: Blog schema with blog data
            owner: User creating the blog

        Returns:
            BlogDB: Created blog database model

        Raises:
            BlogValidationError: If both title and url are missing
        """
        if not blog.title and not blog.url:
            raise BlogValidationError("title and url are missing")

        db_blog = BlogDB(
            user_id=owner.id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes if blog.likes is not None else 0,
        )
        db_blog.user = owner

        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {db_blog.id} created by {owner.username}")
        return db_blog

    async def update_blog(self, blog: BlogDB, blog_update: BlogUpdate) -> BlogDB:
        """
        Apply the fields set in ``blog_update`` to ``blog``.

        Raises:
            BlogValidationError: If the update would leave both title and url empty
        """
        changes: dict[str, Any] = blog_update.model_dump(exclude_unset=True)
        if "likes" in changes and changes["likes"] is None:
            changes.pop("likes")

        title = changes.get("title", blog.title)
        url = changes.get("url", blog.url)
        if not title and not url:
            raise BlogValidationError("title and url are missing")

        for key, value in changes.items():
            setattr(blog, key, value)
        return await self._add_and_refresh(blog)

    def _ordering(self) -> tuple[Any, ...]:
        return (BlogDB.created_at, BlogDB.id)
