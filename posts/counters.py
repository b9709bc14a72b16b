"""
Engagement Counters
===================

Like and view counters for posts. Both are single atomic UPDATE
statements built on ``F()`` expressions, so concurrent requests never
lose an increment and likes can never drop below zero.
"""

from django.conf import settings

from core.exceptions import NotFoundError
from core.services import BaseService
from .repositories import PostRepository, parse_post_id

LIKE = 0
UNLIKE = 1


class CounterService(BaseService):
    """View and like counters."""

    @classmethod
    def adjust_likes(cls, post_id, direction) -> int:
        """
        Add a like (direction 0) or remove one (anything else).

        Removing a like from a post with zero likes is a no-op.

        Returns:
            The like count after the update.

        Raises:
            NotFoundError: if post_id does not resolve.
        """
        pk = parse_post_id(post_id)
        if pk is None or not PostRepository.exists(pk=pk):
            raise NotFoundError(f"Post {post_id} does not exist", resource="post", id=str(post_id))

        if direction == LIKE:
            PostRepository.increment_likes(pk)
        else:
            PostRepository.decrement_likes(pk)

        likes = PostRepository.get_counter(pk, "likes")
        if likes is None:
            # Deleted between the existence check and the update
            raise NotFoundError(f"Post {post_id} does not exist", resource="post", id=str(post_id))

        cls.logger.info("Post %s likes -> %s", pk, likes)
        return likes

    @classmethod
    def record_view(cls, post_id) -> bool:
        """Count one view. Returns False when the post no longer exists."""
        return PostRepository.increment_views(post_id) > 0

    @classmethod
    def schedule_view(cls, post_id) -> None:
        """
        Queue a view increment without waiting for it.

        Broker trouble is logged and dropped; the read that triggered
        the view must still succeed.
        """
        if not getattr(settings, "POSTS_TRACK_VIEWS", True):
            return

        from .tasks import record_post_view

        try:
            record_post_view.delay(str(post_id))
        except Exception as exc:
            cls.logger.warning("Could not queue view for post %s: %s", post_id, exc)
