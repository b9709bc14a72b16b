"""
Post filter compiler.

Turns caller-supplied query parameters into a single ``Q`` predicate.
Only allow-listed keys reach the ORM; each maps to a typed lookup.

    compile_filters({"status": "publish", "title": "django", "pageNum": "2"})
    # -> Q(status="publish") & Q(title__icontains="django")
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from django.db.models import Q

from core.exceptions import ValidationError
from .models import Post

# Consumed by pagination, never turned into predicates
PAGINATION_KEYS = frozenset({"pageNum", "pageSize"})
STATUS_KEY = "status"


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes"):
        return True
    if text in ("0", "false", "no"):
        return False
    raise ValueError(value)


@dataclass(frozen=True)
class FieldFilter:
    """An exposed filter key bound to an ORM lookup."""
    lookup: str
    coerce: Callable[[Any], Any] = str
    # Protected bodies must not be probeable through substring matches
    skip_protected: bool = False

    def to_q(self, value) -> Q:
        q = Q(**{self.lookup: self.coerce(value)})
        if self.skip_protected:
            q &= Q(need_password=False)
        return q


FILTERABLE_FIELDS = {
    "title": FieldFilter("title__icontains"),
    "summary": FieldFilter("summary__icontains"),
    "content": FieldFilter("content__icontains", skip_protected=True),
    "author": FieldFilter("author__username__icontains"),
    "category": FieldFilter("category__name__icontains"),
    "isRecommend": FieldFilter("is_recommend", _to_bool),
}

STATUS_VALUES = frozenset(value for value, _ in Post.STATUS_CHOICES)


def compile_status(value) -> Q:
    if value not in STATUS_VALUES:
        raise ValidationError(
            f"Unknown post status '{value}'",
            field=STATUS_KEY,
            allowed=sorted(STATUS_VALUES),
        )
    return Q(status=value)


def compile_filters(params: Mapping) -> Q:
    """
    Compile query parameters into a conjunction of predicates.

    - ``pageNum`` / ``pageSize`` are ignored (see ``posts.pagination``).
    - ``status`` becomes an equality predicate.
    - Every other key must be in ``FILTERABLE_FIELDS``.
    - Empty values are skipped.

    Raises:
        ValidationError: unknown key, unknown status, or uncoercible value.
    """
    predicate = Q()
    if not params:
        return predicate

    for key in params:
        if key in PAGINATION_KEYS:
            continue
        value = params.get(key)
        if value is None or value == "":
            continue

        if key == STATUS_KEY:
            predicate &= compile_status(value)
            continue

        field_filter = FILTERABLE_FIELDS.get(key)
        if field_filter is None:
            raise ValidationError(
                f"Cannot filter posts by '{key}'",
                field=key,
                allowed=sorted(FILTERABLE_FIELDS),
            )
        try:
            predicate &= field_filter.to_q(value)
        except ValueError:
            raise ValidationError(f"Invalid value for '{key}'", field=key)

    return predicate
