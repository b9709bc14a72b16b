"""
Post Services
=============

Business logic for posts: creation and editing rules, filtered and
paginated listings, archives, search and engagement counters.

Every read path returns serialized projections that have already been
through ``posts.redaction``.
"""

from django.utils import timezone

from core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from core.services import BaseService
from .archives import build_archives
from .counters import CounterService
from .filters import STATUS_VALUES, compile_filters
from .models import Post
from .pagination import Page, PageRequest, paginate
from .redaction import redact, redact_rows
from .repositories import CategoryRepository, PostRepository, TagRepository
from .serializers import PostSerializer

# Plain attributes copied from a payload onto the post
WRITABLE_FIELDS = ("summary", "content", "cover_url", "is_recommend", "need_password")

# Category id the admin client sends for "uncategorized"
NO_CATEGORY = (None, "", 0, "0")


class PostService(BaseService):
    """
    Centralised post business logic.

    Views, tasks and management commands all go through here so the
    draft/publish rules, title uniqueness and redaction apply the same
    way everywhere.
    """

    # ── Projection ────────────────────────────────────────────────────

    @staticmethod
    def _project(post) -> dict:
        return dict(PostSerializer(post).data)

    @classmethod
    def _project_page(cls, page: Page) -> Page:
        page.rows = redact_rows(cls._project(post) for post in page.rows)
        return page

    # ── Lookups ───────────────────────────────────────────────────────

    @staticmethod
    def _get_or_404(post_id):
        post = PostRepository.get_by_id_or_none(post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} does not exist", resource="post", id=str(post_id))
        return post

    @staticmethod
    def _resolve_category(category_id):
        if category_id in NO_CATEGORY:
            return None
        category = CategoryRepository.get_by_id_or_none(category_id)
        if category is None:
            raise NotFoundError(
                f"Category {category_id} does not exist",
                resource="category",
                id=category_id,
            )
        return category

    @staticmethod
    def _parse_tag_ids(value) -> list:
        if value in (None, ""):
            return []
        if isinstance(value, str):
            value = value.split(",")
        try:
            return [int(str(item).strip()) for item in value if str(item).strip()]
        except (TypeError, ValueError):
            raise ValidationError("Tag ids must be integers", field="tags")

    @classmethod
    def _resolve_tags(cls, value) -> list:
        ids = cls._parse_tag_ids(value)
        tags = TagRepository.get_by_ids(ids)
        missing = set(ids) - {tag.pk for tag in tags}
        if missing:
            raise NotFoundError("Some tags do not exist", resource="tag", ids=sorted(missing))
        return tags

    @staticmethod
    def _normalize_status(status) -> str:
        if status in (None, ""):
            return Post.STATUS_DRAFT
        if status not in STATUS_VALUES:
            raise ValidationError(f"Unknown post status '{status}'", field="status")
        return status

    @staticmethod
    def _clean_title(title) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Post title is required", field="title")
        return title

    @staticmethod
    def _apply_password(post, data: dict) -> None:
        if "password" in data:
            post.set_password(data.get("password"))
        if post.need_password and not post.password:
            raise ValidationError("A password is required to protect a post", field="password")

    # ── Write ─────────────────────────────────────────────────────────

    @classmethod
    def create(cls, author, data: dict) -> str:
        """
        Create a post on behalf of author.

        Posts start as drafts unless ``status`` is ``publish``, in which
        case the publish time is stamped now.

        Returns:
            The new post id.

        Raises:
            AuthenticationError: no authenticated author
            ValidationError: missing title, bad status, protected without password
            ConflictError: title already in use
            NotFoundError: unknown category or tag id
        """
        if author is None or not getattr(author, "is_authenticated", False):
            raise AuthenticationError("An author is required to create a post")

        title = cls._clean_title(data.get("title"))
        if PostRepository.title_taken(title):
            raise ConflictError(f"Post '{title}' already exists", resource="post", title=title)

        status = cls._normalize_status(data.get("status"))
        category = cls._resolve_category(data.get("category"))
        tags = cls._resolve_tags(data.get("tags"))

        post = Post(
            title=title,
            status=status,
            author=author,
            category=category,
            **{name: data[name] for name in WRITABLE_FIELDS if name in data},
        )
        if status == Post.STATUS_PUBLISH:
            post.publish_time = timezone.now()
        cls._apply_password(post, data)

        with cls.atomic():
            post.save()
            post.tags.set(tags)

        cls.logger.info("Created post %s '%s' (%s)", post.pk, title, status)
        return str(post.pk)

    @classmethod
    def update(cls, post_id, data: dict) -> str:
        """
        Merge a partial payload into an existing post.

        Category and tags are re-resolved only when present. The publish
        time is re-stamped only when the post moves into ``publish``.
        Views, likes and author are never touched.

        Raises:
            NotFoundError: post (or referenced category/tag) missing; nothing is written
            ConflictError: new title belongs to another post
            ValidationError: blank title, bad status, protected without password
        """
        post = cls._get_or_404(post_id)
        # Only merged columns are written back; counters move through F() updates
        changed = {"updated_at"}

        if "title" in data:
            title = cls._clean_title(data.get("title"))
            if PostRepository.title_taken(title, exclude_pk=post.pk):
                raise ConflictError(f"Post '{title}' already exists", resource="post", title=title)
            post.title = title
            changed.add("title")

        if "status" in data:
            status = cls._normalize_status(data.get("status"))
            if status == Post.STATUS_PUBLISH and not post.is_published:
                post.publish_time = timezone.now()
                changed.add("publish_time")
            post.status = status
            changed.add("status")

        if "category" in data:
            post.category = cls._resolve_category(data.get("category"))
            changed.add("category")

        tags = cls._resolve_tags(data.get("tags")) if "tags" in data else None

        for name in WRITABLE_FIELDS:
            if name in data:
                setattr(post, name, data[name])
                changed.add(name)
        cls._apply_password(post, data)
        if "password" in data:
            changed.add("password")

        with cls.atomic():
            post.save(update_fields=changed)
            if tags is not None:
                post.tags.set(tags)

        cls.logger.info("Updated post %s", post.pk)
        return str(post.pk)

    @classmethod
    def remove(cls, post_id) -> None:
        """Hard-delete a post. Raises NotFoundError if it does not exist."""
        post = cls._get_or_404(post_id)
        PostRepository.delete(post)
        cls.logger.info("Deleted post %s", post_id)

    # ── Read ──────────────────────────────────────────────────────────

    @classmethod
    def list_posts(cls, params=None) -> Page:
        """Filtered, paginated posts, newest publish time first."""
        predicate = compile_filters(params or {})
        page = paginate(PostRepository.query(predicate), PageRequest.from_params(params))
        return cls._project_page(page)

    @classmethod
    def list_by_category(cls, category_id, params=None) -> Page:
        predicate = compile_filters(params or {})
        page = paginate(
            PostRepository.get_by_category(category_id, predicate),
            PageRequest.from_params(params),
        )
        return cls._project_page(page)

    @classmethod
    def list_by_tag(cls, tag_id, params=None) -> Page:
        predicate = compile_filters(params or {})
        page = paginate(
            PostRepository.get_by_tag(tag_id, predicate),
            PageRequest.from_params(params),
        )
        return cls._project_page(page)

    @classmethod
    def list_recommended(cls, params=None) -> Page:
        predicate = compile_filters(params or {})
        page = paginate(
            PostRepository.get_recommended(predicate),
            PageRequest.from_params(params),
        )
        return cls._project_page(page)

    @classmethod
    def get_by_id(cls, post_id, password=None) -> dict:
        """
        Full projection of one post.

        Queues a view increment without waiting for it, so the returned
        ``views`` may not include this read yet. The body of a protected
        post is only included when ``password`` matches.
        """
        post = PostRepository.get_detail(post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} does not exist", resource="post", id=str(post_id))

        CounterService.schedule_view(post.pk)

        unlocked = post.need_password and post.check_password(password)
        return redact(cls._project(post), unlocked=unlocked)

    @classmethod
    def check_password(cls, post_id, password) -> bool:
        """True if password unlocks the post (always True for open posts)."""
        post = cls._get_or_404(post_id)
        if not post.need_password:
            return True
        return post.check_password(password)

    @classmethod
    def search(cls, keyword) -> list:
        """Unpaginated keyword matches on title, summary, or content."""
        keyword = (keyword or "").strip()
        if not keyword:
            return []
        return redact_rows(cls._project(post) for post in PostRepository.search(keyword))

    @classmethod
    def get_archives(cls) -> dict:
        """Published posts as ``{year: {month: [post, ...]}}``."""
        return build_archives(
            PostRepository.get_published_by_time(),
            project=lambda post: redact(cls._project(post)),
        )

    # ── Engagement ────────────────────────────────────────────────────

    @classmethod
    def like(cls, post_id, direction) -> int:
        """Like (0) or unlike (anything else). Returns the new like count."""
        return CounterService.adjust_likes(post_id, direction)
