"""
Generic Base Repository
=======================

Type-safe, generic repository over a Django model manager.
App-specific repositories inherit from this and add their own
query constructors.

Usage:
    from core.repositories import BaseRepository
    from posts.models import Tag

    class TagRepository(BaseRepository[Tag]):
        model = Tag

        @classmethod
        def get_by_ids(cls, ids):
            return list(cls.model.objects.filter(pk__in=ids))
"""

from typing import TypeVar, Generic, Type, Optional, Any
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Generic repository with the lookups every app repository shares.

    Subclasses MUST set the `model` class attribute:

        class CategoryRepository(BaseRepository[Category]):
            model = Category
    """

    model: Type[T]

    # ── Read ──────────────────────────────────────────────────────────

    @classmethod
    def get_by_id_or_none(cls, pk: Any) -> Optional[T]:
        """
        Get a single instance by primary key, or None.

        A key the primary-key field cannot parse (e.g. a malformed UUID)
        is treated the same as a missing row.
        """
        try:
            return cls.model.objects.filter(pk=pk).first()
        except (DjangoValidationError, ValueError, TypeError):
            return None

    @classmethod
    def exists(cls, **kwargs) -> bool:
        """Check if at least one instance matches the given filters."""
        return cls.model.objects.filter(**kwargs).exists()

    # ── Write ─────────────────────────────────────────────────────────

    @classmethod
    def delete(cls, instance: T) -> None:
        """Delete a single instance."""
        instance.delete()
