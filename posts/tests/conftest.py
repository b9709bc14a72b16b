"""
Shared fixtures for the posts test suite.
"""

import itertools

import pytest

from posts.models import Category, Post, Tag


@pytest.fixture
def author(django_user_model):
    return django_user_model.objects.create_user(username="editor", password="secret-pass")


@pytest.fixture
def category():
    return Category.objects.create(name="Engineering")


@pytest.fixture
def other_category():
    return Category.objects.create(name="Journal")


@pytest.fixture
def tags():
    return [Tag.objects.create(name="django"), Tag.objects.create(name="orm")]


@pytest.fixture
def make_post(author):
    """Factory that writes posts straight to the ORM, bypassing PostService."""
    counter = itertools.count(1)

    def _make(**overrides):
        post_tags = overrides.pop("tags", [])
        password = overrides.pop("password", None)
        fields = {
            "title": f"Post {next(counter)}",
            "summary": "A short summary",
            "content": "The full body text",
            "author": author,
        }
        fields.update(overrides)
        post = Post(**fields)
        if password:
            post.set_password(password)
        post.save()
        if post_tags:
            post.tags.set(post_tags)
        return post

    return _make
