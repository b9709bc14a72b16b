"""
Endpoint tests for the post REST API.

Run:  python -m pytest posts/tests/test_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient

from posts.models import Post

pytestmark = pytest.mark.django_db

API = "/api/v1"


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def author_client(author):
    client = APIClient()
    client.force_authenticate(user=author)
    return client


class TestPostList:
    def test_shape(self, client, make_post):
        for _ in range(3):
            make_post()
        r = client.get(f"{API}/posts/", {"pageSize": 2})
        assert r.status_code == 200
        data = r.json()
        assert set(data) == {"list", "total", "pageNum", "pageSize"}
        assert len(data["list"]) == 2
        assert data["total"] == 3

    def test_unknown_filter_is_400(self, client):
        r = client.get(f"{API}/posts/", {"secret_column": "x"})
        assert r.status_code == 400
        assert r.json()["error"] == "validation_error"

    def test_protected_content_hidden(self, client, make_post):
        make_post(content="hidden", need_password=True, password="pw")
        [row] = client.get(f"{API}/posts/").json()["list"]
        assert row["content"] == ""


class TestPostCreate:
    def test_requires_login(self, client):
        r = client.post(f"{API}/posts/", {"title": "Nope"}, format="json")
        assert r.status_code in (401, 403)
        assert not Post.objects.exists()

    def test_creates(self, author_client, category, tags):
        r = author_client.post(f"{API}/posts/", {
            "title": "Fresh",
            "content": "Body",
            "status": "publish",
            "category": category.pk,
            "tags": f"{tags[0].pk},{tags[1].pk}",
        }, format="json")
        assert r.status_code == 201
        post = Post.objects.get(pk=r.json()["id"])
        assert post.status == "publish"
        assert post.tags.count() == 2

    def test_duplicate_title_is_409(self, author_client, make_post):
        make_post(title="Taken")
        r = author_client.post(f"{API}/posts/", {"title": "Taken"}, format="json")
        assert r.status_code == 409
        assert r.json()["detail"]["title"] == "Taken"

    def test_invalid_payload_is_400(self, author_client):
        r = author_client.post(f"{API}/posts/", {"status": "publish"}, format="json")
        assert r.status_code == 400


class TestPostDetail:
    def test_get(self, client, make_post):
        post = make_post(title="Read me")
        r = client.get(f"{API}/posts/{post.pk}/")
        assert r.status_code == 200
        assert r.json()["title"] == "Read me"

    def test_get_missing_is_404(self, client):
        r = client.get(f"{API}/posts/{uuid.uuid4()}/")
        assert r.status_code == 404
        assert r.json()["error"] == "not_found"

    def test_password_unlocks(self, client, make_post):
        post = make_post(content="hidden", need_password=True, password="pw")
        assert client.get(f"{API}/posts/{post.pk}/").json()["content"] == ""
        r = client.get(f"{API}/posts/{post.pk}/", {"password": "pw"})
        assert r.json()["content"] == "hidden"

    def test_patch(self, author_client, make_post):
        post = make_post(summary="old")
        r = author_client.patch(f"{API}/posts/{post.pk}/", {"summary": "new"}, format="json")
        assert r.status_code == 200
        post.refresh_from_db()
        assert post.summary == "new"

    def test_patch_missing_is_404(self, author_client):
        r = author_client.patch(f"{API}/posts/{uuid.uuid4()}/", {"summary": "x"}, format="json")
        assert r.status_code == 404

    def test_delete(self, author_client, client, make_post):
        post = make_post()
        assert author_client.delete(f"{API}/posts/{post.pk}/").status_code == 204
        assert client.get(f"{API}/posts/{post.pk}/").status_code == 404

    def test_delete_requires_login(self, client, make_post):
        post = make_post()
        assert client.delete(f"{API}/posts/{post.pk}/").status_code in (401, 403)
        assert Post.objects.filter(pk=post.pk).exists()


class TestEngagement:
    def test_like_and_unlike(self, client, make_post):
        post = make_post()
        r = client.post(f"{API}/posts/{post.pk}/likes/", {"type": 0}, format="json")
        assert r.json()["likes"] == 1
        r = client.post(f"{API}/posts/{post.pk}/likes/", {"type": 1}, format="json")
        assert r.json()["likes"] == 0
        r = client.post(f"{API}/posts/{post.pk}/likes/", {"type": 1}, format="json")
        assert r.json()["likes"] == 0

    def test_bad_like_type(self, client, make_post):
        post = make_post()
        r = client.post(f"{API}/posts/{post.pk}/likes/", {"type": "up"}, format="json")
        assert r.status_code == 400

    def test_like_missing_post(self, client):
        r = client.post(f"{API}/posts/{uuid.uuid4()}/likes/", {"type": 0}, format="json")
        assert r.status_code == 404

    def test_check_password(self, client, make_post):
        post = make_post(need_password=True, password="pw")
        r = client.post(f"{API}/posts/{post.pk}/password/", {"password": "pw"}, format="json")
        assert r.json() == {"pass": True}


class TestAggregates:
    def test_archives(self, client, make_post):
        make_post(status="publish")
        make_post()
        data = client.get(f"{API}/posts/archives/").json()
        rows = [p for months in data.values() for posts in months.values() for p in posts]
        assert len(rows) == 1

    def test_recommended(self, client, make_post):
        make_post(is_recommend=True)
        make_post()
        assert client.get(f"{API}/posts/recommended/").json()["total"] == 1

    def test_search(self, client, make_post):
        make_post(title="Needle")
        make_post(title="Hay")
        rows = client.get(f"{API}/posts/search/", {"keyword": "needle"}).json()
        assert [row["title"] for row in rows] == ["Needle"]

    def test_by_category(self, client, make_post, category):
        make_post(category=category)
        make_post()
        assert client.get(f"{API}/categories/{category.pk}/posts/").json()["total"] == 1

    def test_by_tag(self, client, make_post, tags):
        make_post(tags=tags)
        make_post()
        assert client.get(f"{API}/tags/{tags[0].pk}/posts/").json()["total"] == 1
