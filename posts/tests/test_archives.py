"""
Tests for archive aggregation.

Run:  python -m pytest posts/tests/test_archives.py -v
"""

from datetime import datetime, timezone as dt_timezone
from types import SimpleNamespace

import pytest

from posts.archives import MONTH_NAMES, build_archives, month_name
from posts.services import PostService


def _at(year, month, day=1, hour=12):
    return datetime(year, month, day, hour, tzinfo=dt_timezone.utc)


class TestBuildArchives:
    def test_month_names(self):
        assert len(MONTH_NAMES) == 12
        assert month_name(_at(2023, 3)) == "March"
        assert month_name(_at(2024, 12)) == "December"

    def test_groups_by_year_then_month(self):
        posts = [
            SimpleNamespace(title="c", publish_time=_at(2024, 1, 5)),
            SimpleNamespace(title="b", publish_time=_at(2023, 3, 20)),
            SimpleNamespace(title="a", publish_time=_at(2023, 3, 2)),
        ]
        archives = build_archives(posts, project=lambda p: p.title)
        assert archives == {2024: {"January": ["c"]}, 2023: {"March": ["b", "a"]}}
        assert list(archives) == [2024, 2023]

    def test_posts_without_publish_time_are_skipped(self):
        posts = [SimpleNamespace(title="x", publish_time=None)]
        assert build_archives(posts) == {}


@pytest.mark.django_db
class TestGetArchives:
    def test_published_posts_grouped(self, make_post):
        make_post(title="Jan 2024", status="publish", publish_time=_at(2024, 1, 10))
        make_post(title="Mar 2023 late", status="publish", publish_time=_at(2023, 3, 25))
        make_post(title="Mar 2023 early", status="publish", publish_time=_at(2023, 3, 1))
        make_post(title="Draft", status="draft")

        archives = PostService.get_archives()

        assert set(archives) == {2023, 2024}
        assert list(archives[2023]) == ["March"]
        assert [p["title"] for p in archives[2023]["March"]] == ["Mar 2023 late", "Mar 2023 early"]
        assert list(archives[2024]) == ["January"]
        assert [p["title"] for p in archives[2024]["January"]] == ["Jan 2024"]

    def test_every_published_post_appears_once(self, make_post):
        for month in range(1, 7):
            make_post(status="publish", publish_time=_at(2022, month))
        archives = PostService.get_archives()
        titles = [p["title"] for months in archives.values() for rows in months.values() for p in rows]
        assert len(titles) == len(set(titles)) == 6

    def test_protected_posts_are_redacted(self, make_post):
        make_post(status="publish", need_password=True, password="pw", content="hidden")
        archives = PostService.get_archives()
        [row] = [p for months in archives.values() for rows in months.values() for p in rows]
        assert row["content"] == ""
        assert row["is_redacted"] is True
