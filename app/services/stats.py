"""Blog statistics built from the aggregation helpers."""

from app.schemas import AuthorBlogsResponse, AuthorLikesResponse, BlogResponse, BlogStatsResponse
from app.utils import list_helper


def build_stats(blogs: list[BlogResponse]) -> BlogStatsResponse:
    """
    Run the aggregation functions over a blog snapshot.

    Parameters
    ----------
    blogs : list[BlogResponse]
        Validated blogs in their natural order.

    Returns
    -------
    BlogStatsResponse
        Statistics with None for absent results.
    """
    most_blogs = list_helper.most_blogs(blogs)
    most_likes = list_helper.most_likes(blogs)
    return BlogStatsResponse(
        total_likes=list_helper.total_likes(blogs),
        favorite_blog=list_helper.favorite_blog(blogs),
        most_blogs=AuthorBlogsResponse.model_validate(most_blogs) if most_blogs else None,
        most_likes=AuthorLikesResponse.model_validate(most_likes) if most_likes else None,
    )
