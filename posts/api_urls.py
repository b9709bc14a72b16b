"""
Post API URL Configuration
"""

from django.urls import path
from . import api_views

app_name = 'posts_api'

urlpatterns = [
    path('posts/', api_views.PostListCreateView.as_view(), name='post_list'),
    path('posts/archives/', api_views.PostArchiveView.as_view(), name='archives'),
    path('posts/recommended/', api_views.RecommendedPostListView.as_view(), name='recommended'),
    path('posts/search/', api_views.PostSearchView.as_view(), name='search'),
    path('posts/<str:post_id>/', api_views.PostDetailView.as_view(), name='post_detail'),
    path('posts/<str:post_id>/likes/', api_views.PostLikeView.as_view(), name='post_likes'),
    path('posts/<str:post_id>/password/', api_views.PostPasswordView.as_view(), name='post_password'),
    path('categories/<int:category_id>/posts/', api_views.CategoryPostListView.as_view(), name='category_posts'),
    path('tags/<int:tag_id>/posts/', api_views.TagPostListView.as_view(), name='tag_posts'),
]
