"""
Post Serializers - projections returned by the post service and
payload validation for the REST endpoints
"""

from rest_framework import serializers
from .models import Post, Category, Tag


class TagSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ['id', 'name', 'slug']


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'description']


class PostSerializer(serializers.ModelSerializer):
    """Full post projection (password hash never included)."""
    id = serializers.CharField(read_only=True)
    category = CategorySerializer(read_only=True)
    tags = TagSerializer(many=True, read_only=True)
    author_name = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            'id', 'title', 'summary', 'content', 'cover_url',
            'status', 'category', 'tags', 'author_name',
            'views', 'likes', 'is_recommend', 'need_password',
            'created_at', 'updated_at', 'publish_time',
        ]

    def get_author_name(self, obj):
        if obj.author:
            return obj.author.get_full_name() or obj.author.get_username()
        return None


class TagIdsField(serializers.Field):
    """Accepts a list of ids or a comma-separated string of ids."""

    default_error_messages = {
        'invalid': 'Expected a list of tag ids or a comma-separated string.',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = [part for part in data.split(',') if part.strip()]
        if not isinstance(data, (list, tuple)):
            self.fail('invalid')
        try:
            return [int(str(item).strip()) for item in data]
        except ValueError:
            self.fail('invalid')

    def to_representation(self, value):
        return value


class PostWriteSerializer(serializers.Serializer):
    """Validates create/update payloads before they reach PostService."""
    title = serializers.CharField(max_length=200)
    summary = serializers.CharField(required=False, allow_blank=True)
    content = serializers.CharField(required=False, allow_blank=True)
    cover_url = serializers.URLField(required=False, allow_blank=True, max_length=500)
    status = serializers.ChoiceField(
        choices=Post.STATUS_CHOICES,
        required=False,
        allow_blank=True,
    )
    category = serializers.IntegerField(required=False, allow_null=True)
    tags = TagIdsField(required=False)
    is_recommend = serializers.BooleanField(required=False)
    need_password = serializers.BooleanField(required=False)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
