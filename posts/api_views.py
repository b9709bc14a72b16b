"""
Post API Views - REST endpoints over PostService
"""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationError
from .counters import LIKE, UNLIKE
from .serializers import PostWriteSerializer
from .services import PostService


class WriteProtectedMixin:
    """Anyone may read; only authenticated users may write."""

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [AllowAny()]
        return [IsAuthenticated()]


class PostListCreateView(WriteProtectedMixin, APIView):
    """
    GET  /api/v1/posts/?pageNum=1&pageSize=10&status=publish&title=...
    POST /api/v1/posts/
    """

    def get(self, request):
        page = PostService.list_posts(request.query_params.dict())
        return Response(page.to_dict())

    def post(self, request):
        serializer = PostWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        post_id = PostService.create(request.user, serializer.validated_data)
        return Response({"id": post_id}, status=status.HTTP_201_CREATED)


class PostDetailView(WriteProtectedMixin, APIView):
    """
    GET    /api/v1/posts/<id>/?password=...
    PATCH  /api/v1/posts/<id>/
    DELETE /api/v1/posts/<id>/
    """

    def get(self, request, post_id):
        password = request.query_params.get("password")
        return Response(PostService.get_by_id(post_id, password=password))

    def patch(self, request, post_id):
        serializer = PostWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated_id = PostService.update(post_id, serializer.validated_data)
        return Response({"id": updated_id})

    def delete(self, request, post_id):
        PostService.remove(post_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PostLikeView(APIView):
    """
    POST /api/v1/posts/<id>/likes/
    {"type": 0}  // 0 = like, 1 = unlike
    """
    permission_classes = [AllowAny]

    def post(self, request, post_id):
        try:
            direction = int(request.data.get("type", LIKE))
        except (TypeError, ValueError):
            raise ValidationError("type must be 0 (like) or 1 (unlike)", field="type")
        if direction not in (LIKE, UNLIKE):
            raise ValidationError("type must be 0 (like) or 1 (unlike)", field="type")

        likes = PostService.like(post_id, direction)
        return Response({"id": str(post_id), "likes": likes})


class PostPasswordView(APIView):
    """
    POST /api/v1/posts/<id>/password/
    {"password": "..."}
    """
    permission_classes = [AllowAny]

    def post(self, request, post_id):
        ok = PostService.check_password(post_id, request.data.get("password", ""))
        return Response({"pass": ok})


class PostArchiveView(APIView):
    """GET /api/v1/posts/archives/"""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(PostService.get_archives())


class RecommendedPostListView(APIView):
    """GET /api/v1/posts/recommended/?pageNum=1&pageSize=10"""
    permission_classes = [AllowAny]

    def get(self, request):
        page = PostService.list_recommended(request.query_params.dict())
        return Response(page.to_dict())


class PostSearchView(APIView):
    """GET /api/v1/posts/search/?keyword=..."""
    permission_classes = [AllowAny]

    def get(self, request):
        keyword = request.query_params.get("keyword", "")
        return Response(PostService.search(keyword))


class CategoryPostListView(APIView):
    """GET /api/v1/categories/<id>/posts/"""
    permission_classes = [AllowAny]

    def get(self, request, category_id):
        page = PostService.list_by_category(category_id, request.query_params.dict())
        return Response(page.to_dict())


class TagPostListView(APIView):
    """GET /api/v1/tags/<id>/posts/"""
    permission_classes = [AllowAny]

    def get(self, request, tag_id):
        page = PostService.list_by_tag(tag_id, request.query_params.dict())
        return Response(page.to_dict())
