"""
Archive aggregation: published posts grouped by year, then month.
"""

from typing import Callable, Iterable, Optional

from django.utils import timezone

# Fixed English names; calendar.month_name follows the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(moment) -> str:
    return MONTH_NAMES[moment.month - 1]


def build_archives(posts: Iterable, project: Optional[Callable] = None) -> dict:
    """
    Group posts into ``{year: {month_name: [post, ...]}}``.

    Posts must arrive newest first; both levels keep that order.
    ``project`` turns each post into its output form (defaults to the
    post itself). Posts without a publish time are skipped.
    """
    archives = {}
    for post in posts:
        if post.publish_time is None:
            continue
        moment = timezone.localtime(post.publish_time)
        months = archives.setdefault(moment.year, {})
        bucket = months.setdefault(month_name(moment), [])
        bucket.append(project(post) if project else post)
    return archives
