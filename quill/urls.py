"""
Quill URL Configuration
"""

from django.urls import path, include
from django.http import JsonResponse


def api_root(request):
    """API root listing the public endpoints."""
    return JsonResponse({
        "service": "Quill API",
        "version": "1.0.0",
        "posts": "/api/v1/posts/",
    })


urlpatterns = [
    path('', api_root, name='api_root'),
    path('api/v1/', include('posts.api_urls')),
]
