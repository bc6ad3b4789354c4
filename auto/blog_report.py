#!/usr/bin/env python3
"""
Blog Report Script.

Prints statistics over the blogs stored in the database as JSON: total likes,
the favorite blog, the author with most blogs and the author with most likes.

Usage:
    uv run python auto/blog_report.py
    uv run python auto/blog_report.py --limit 100 --compact

Environment Variables:
    DATABASE_URL: Database to read from (default: sqlite+aiosqlite:///./bloglist.db)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from collections.abc import Sequence
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

from orjson import OPT_INDENT_2, dumps
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from app.db.database import close_db, create_session_maker, init_db, transaction  # noqa: E402
from app.errors import BaseAppError  # noqa: E402
from app.repositories import BlogRepository  # noqa: E402
from app.schemas import BlogResponse, BlogStatsResponse  # noqa: E402
from app.services import build_stats  # noqa: E402


async def collect_stats(
    limit: int | None = None,
    bind: AsyncEngine | None = None,
) -> BlogStatsResponse:
    """
    Load a snapshot of the stored blogs and aggregate it.

    Parameters
    ----------
    limit : int | None
        Only consider the first ``limit`` blogs in creation order.
    bind : AsyncEngine | None
        Engine to read from, defaults to the application engine.

    Returns
    -------
    BlogStatsResponse
        Aggregated statistics.
    """
    await init_db(bind)
    session_maker = create_session_maker(bind) if bind else None
    async with transaction(session_maker) as session:
        db_blogs = await BlogRepository(session).get_all(limit=limit)
        blogs = [BlogResponse.model_validate(blog) for blog in db_blogs]
    return build_stats(blogs)


def render(stats: BlogStatsResponse, compact: bool = False) -> str:
    """
    Serialize statistics with their public (camelCase) field names.

    Parameters
    ----------
    stats : BlogStatsResponse
        Statistics to render.
    compact : bool
        Single line output instead of a two space indent.

    Returns
    -------
    str
        JSON document.
    """
    payload = stats.model_dump(mode="json", by_alias=True)
    if compact:
        return dumps(payload).decode()
    return dumps(payload, option=OPT_INDENT_2).decode()


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """
    Parse command line arguments.

    Parameters
    ----------
    argv : Sequence[str] | None
        Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with defaults applied.
    """
    parser = ArgumentParser(
        description="Print statistics of the stored blogs as JSON.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All blogs, indented
  uv run python auto/blog_report.py

  # First 10 blogs, on a single line
  uv run python auto/blog_report.py --limit 10 --compact
        """,
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=None,
        help="Only aggregate the first N blogs (default: all)",
    )
    parser.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="Print the JSON on a single line instead of indented",
    )
    return parser.parse_args(argv)


async def main(argv: Sequence[str] | None = None, bind: AsyncEngine | None = None) -> int:
    """
    Run the report.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)
    if args.limit is not None and args.limit < 0:
        print("❌ --limit must not be negative")
        return 1

    try:
        stats = await collect_stats(args.limit, bind)
    except BaseAppError as e:
        print(f"\n❌ Database error: {e.detail}")
        return 1
    except SQLAlchemyError as e:
        print(f"\n❌ Database error: {e}")
        return 1
    finally:
        if bind is None:
            await close_db()

    print(render(stats, compact=args.compact))
    return 0


if __name__ == "__main__":
    exit_code = asyncio_run(main())
    sys_exit(exit_code)
