"""
Aggregate statistics over a snapshot of blog records.

All functions are pure: they only read the sequence they are given, keep no
state between calls and never raise for well-formed input. An empty sequence
yields ``0`` for :func:`total_likes` and ``None`` for the other three.

Tie-breaks
----------
- :func:`favorite_blog` keeps the *last* record reaching the maximum likes.
- :func:`most_blogs` and :func:`most_likes` keep the *first* author (in
  first-seen order) reaching the maximum.

Examples
--------
>>> blogs = [BlogRecord(author="Ada", likes=3), BlogRecord(author="Bob", likes=5)]
>>> total_likes(blogs)
8
>>> most_likes(blogs)
AuthorLikes(author='Bob', likes=5)
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol


class BlogLike(Protocol):
    """Anything exposing an author and a likes count."""

    @property
    def author(self) -> str: ...

    @property
    def likes(self) -> int: ...


@dataclass(frozen=True)
class BlogRecord:
    """A blog post summary as consumed by the aggregation functions."""

    author: str
    likes: int = 0
    title: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class AuthorBlogs:
    author: str
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    author: str
    likes: int


def total_likes(blogs: Sequence[BlogLike]) -> int:
    """Return the sum of likes across all blogs."""
    return sum(blog.likes for blog in blogs)


def favorite_blog[B: BlogLike](blogs: Sequence[B]) -> B | None:
    """
    Return the blog with the most likes.

    Scans left to right and replaces the current best whenever its likes are
    lower than or equal to the candidate's, so on a tie the later blog wins.

    Args:
        blogs: Blog records in their natural order

    Returns:
        B | None: The same object found in ``blogs``, or None if empty
    """
    best: B | None = None
    for blog in blogs:
        if best is None or best.likes <= blog.likes:
            best = blog
    return best


def _group_by_author(
    blogs: Sequence[BlogLike],
    value: Callable[[BlogLike], int],
) -> dict[str, int]:
    # dict keeps first-seen insertion order, which the tie-break relies on
    totals: dict[str, int] = {}
    for blog in blogs:
        totals[blog.author] = totals.get(blog.author, 0) + value(blog)
    return totals


def _first_max(totals: dict[str, int]) -> tuple[str, int] | None:
    top: tuple[str, int] | None = None
    for author, count in totals.items():
        if top is None or top[1] < count:
            top = (author, count)
    return top


def most_blogs(blogs: Sequence[BlogLike]) -> AuthorBlogs | None:
    """
    Return the author with the most blogs and their blog count.

    On equal counts the author seen first in ``blogs`` wins.
    """
    top = _first_max(_group_by_author(blogs, lambda _: 1))
    if top is None:
        return None
    return AuthorBlogs(author=top[0], blogs=top[1])


def most_likes(blogs: Sequence[BlogLike]) -> AuthorLikes | None:
    """
    Return the author whose blogs have the most likes in total.

    On equal totals the author seen first in ``blogs`` wins.
    """
    top = _first_max(_group_by_author(blogs, lambda blog: blog.likes))
    if top is None:
        return None
    return AuthorLikes(author=top[0], likes=top[1])
