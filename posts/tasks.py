"""
Background tasks for the posts app.

View counting runs here so reads never wait on the counter write.
"""

import logging
from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(
    name="posts.record_view",
    ignore_result=True,
)
def record_post_view(post_id: str):
    """
    Add one view to a post.

    The post may have been deleted since the read that queued this task;
    that case is logged and otherwise ignored.
    """
    from posts.counters import CounterService

    if not CounterService.record_view(post_id):
        logger.info("Skipped view for missing post %s", post_id)
