"""
Page-number pagination for post listings.

Malformed page input is not an error: it falls back to the defaults.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from django.conf import settings
from django.db.models import QuerySet

DEFAULT_PAGE_NUM = 1


def default_page_size() -> int:
    return getattr(settings, "POSTS_DEFAULT_PAGE_SIZE", 10)


def _coerce_positive(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@dataclass(frozen=True)
class PageRequest:
    page_num: int = DEFAULT_PAGE_NUM
    page_size: int = field(default_factory=default_page_size)

    @classmethod
    def from_params(cls, params: Optional[Mapping]) -> "PageRequest":
        """Read ``pageNum`` / ``pageSize`` from query params."""
        params = params or {}
        return cls(
            page_num=_coerce_positive(params.get("pageNum"), DEFAULT_PAGE_NUM),
            page_size=_coerce_positive(params.get("pageSize"), default_page_size()),
        )

    @property
    def offset(self) -> int:
        return (self.page_num - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Page:
    rows: list
    total: int
    page_num: int
    page_size: int

    def to_dict(self):
        return {
            "list": self.rows,
            "total": self.total,
            "pageNum": self.page_num,
            "pageSize": self.page_size,
        }


def paginate(queryset: QuerySet, page_request: PageRequest) -> Page:
    """
    Slice a queryset into one page.

    ``total`` counts the whole filtered queryset, not the slice.
    """
    total = queryset.count()
    start = page_request.offset
    rows = list(queryset[start:start + page_request.limit])
    return Page(
        rows=rows,
        total=total,
        page_num=page_request.page_num,
        page_size=page_request.page_size,
    )
