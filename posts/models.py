"""
Post Models - articles, their categories and tags
"""

import uuid

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.text import slugify


class Category(models.Model):
    """Post category for organization."""
    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        verbose_name_plural = "Categories"
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Tag(models.Model):
    """Tags for posts."""
    name = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(max_length=50, unique=True, blank=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Post(models.Model):
    """Blog post with engagement counters and optional password protection."""

    STATUS_DRAFT = 'draft'
    STATUS_PUBLISH = 'publish'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_PUBLISH, 'Published'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Core fields
    title = models.CharField(max_length=200, unique=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='posts'
    )

    # Content
    summary = models.TextField(blank=True)
    content = models.TextField(blank=True)
    cover_url = models.URLField(max_length=500, blank=True)

    # Organization
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='posts'
    )
    tags = models.ManyToManyField(Tag, blank=True, related_name='posts')

    # Status and timestamps
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    publish_time = models.DateTimeField(null=True, blank=True)

    # Engagement
    views = models.PositiveIntegerField(default=0)
    likes = models.PositiveIntegerField(default=0)
    is_recommend = models.BooleanField(default=False)

    # Protection; password holds a hash, never the raw secret
    need_password = models.BooleanField(default=False)
    password = models.CharField(max_length=128, blank=True)

    class Meta:
        ordering = ['-publish_time', '-created_at']
        indexes = [
            models.Index(fields=['-publish_time'], name='posts_post_publish_time_idx'),
            models.Index(fields=['status'], name='posts_post_status_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(status='draft') | Q(publish_time__isnull=False),
                name='post_published_has_publish_time',
            ),
        ]

    def save(self, *args, **kwargs):
        if self.status == self.STATUS_PUBLISH and not self.publish_time:
            self.publish_time = timezone.now()
            update_fields = kwargs.get('update_fields')
            if update_fields is not None:
                kwargs['update_fields'] = {*update_fields, 'publish_time'}
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISH

    def set_password(self, raw_password):
        """Store a hash of the access secret; an empty secret clears it."""
        self.password = make_password(raw_password) if raw_password else ''

    def check_password(self, raw_password):
        """Return True when raw_password unlocks this post."""
        if not raw_password or not self.password:
            return False
        return check_password(raw_password, self.password)
