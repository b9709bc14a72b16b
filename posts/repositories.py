"""
Post Repositories
=================

Data-access layer for Post, Category, and Tag models.
Every query the post engine runs is built here.
"""

import uuid

from django.db.models import F, Q, QuerySet

from core.repositories import BaseRepository
from .models import Post, Category, Tag


def parse_post_id(value):
    """Return value as a UUID, or None when it cannot be one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class PostRepository(BaseRepository[Post]):
    """Post data access."""

    model = Post

    @classmethod
    def with_relations(cls, qs: QuerySet = None) -> QuerySet:
        """Join category and author, prefetch tags, newest publish first."""
        if qs is None:
            qs = cls.model.objects.all()
        return (
            qs.select_related("category", "author")
            .prefetch_related("tags")
            .order_by("-publish_time", "-created_at")
        )

    @classmethod
    def get_by_id_or_none(cls, pk):
        pk = parse_post_id(pk)
        if pk is None:
            return None
        return cls.model.objects.filter(pk=pk).first()

    @classmethod
    def get_detail(cls, pk):
        """Get a post with its relations loaded, or None."""
        pk = parse_post_id(pk)
        if pk is None:
            return None
        return cls.with_relations(cls.model.objects.filter(pk=pk)).first()

    @classmethod
    def title_taken(cls, title: str, exclude_pk=None) -> bool:
        """Check whether another post already uses this title."""
        qs = cls.model.objects.filter(title=title)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    @classmethod
    def query(cls, predicate: Q) -> QuerySet:
        """Posts matching a compiled predicate, with relations."""
        return cls.with_relations(cls.model.objects.filter(predicate))

    @classmethod
    def get_by_category(cls, category_id, predicate: Q) -> QuerySet:
        return cls.query(predicate).filter(category_id=category_id)

    @classmethod
    def get_by_tag(cls, tag_id, predicate: Q) -> QuerySet:
        return cls.query(predicate).filter(tags__id=tag_id).distinct()

    @classmethod
    def get_recommended(cls, predicate: Q) -> QuerySet:
        return cls.query(predicate).filter(is_recommend=True)

    @classmethod
    def get_published_by_time(cls) -> QuerySet:
        """All published posts, newest publish time first."""
        return cls.with_relations(
            cls.model.objects.filter(status=Post.STATUS_PUBLISH, publish_time__isnull=False)
        )

    @classmethod
    def search(cls, keyword: str) -> QuerySet:
        """
        Keyword search across title, summary, and content.

        Bodies of password-protected posts are not searched.
        """
        return cls.with_relations(
            cls.model.objects.filter(
                Q(title__icontains=keyword)
                | Q(summary__icontains=keyword)
                | Q(content__icontains=keyword, need_password=False)
            )
        )

    # ── Counters ──────────────────────────────────────────────────────

    @classmethod
    def increment_views(cls, pk) -> int:
        """Atomically add one view. Returns the number of rows touched."""
        pk = parse_post_id(pk)
        if pk is None:
            return 0
        return cls.model.objects.filter(pk=pk).update(views=F("views") + 1)

    @classmethod
    def increment_likes(cls, pk) -> int:
        return cls.model.objects.filter(pk=pk).update(likes=F("likes") + 1)

    @classmethod
    def decrement_likes(cls, pk) -> int:
        """Atomically remove one like; rows already at zero are left alone."""
        return cls.model.objects.filter(pk=pk, likes__gt=0).update(likes=F("likes") - 1)

    @classmethod
    def get_counter(cls, pk, field: str):
        return cls.model.objects.filter(pk=pk).values_list(field, flat=True).first()


class CategoryRepository(BaseRepository[Category]):
    """Post category data access."""

    model = Category


class TagRepository(BaseRepository[Tag]):
    """Post tag data access."""

    model = Tag

    @classmethod
    def get_by_ids(cls, ids) -> list:
        """Return the tags with the given ids (missing ids are dropped)."""
        if not ids:
            return []
        return list(cls.model.objects.filter(pk__in=ids))
