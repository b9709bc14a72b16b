"""
Test Settings

In-memory SQLite, eager Celery and a fast password hasher.
"""

from .base import *

DEBUG = False
SECRET_KEY = "django-insecure-test-key"
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Background tasks run inline so view counts settle before assertions
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

POSTS_DEFAULT_PAGE_SIZE = 10
POSTS_REDACTED_PLACEHOLDER = ""
POSTS_TRACK_VIEWS = True
