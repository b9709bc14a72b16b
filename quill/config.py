"""
Configuration Layer
===================

Every environment variable Quill reads is declared here, once, as a field
of a frozen dataclass. Settings modules read ``config`` instead of calling
``os.getenv()`` themselves.

Usage:
    from quill.config import config

    config.content.default_page_size
    config.database.as_django()

    if config.is_production:
        ...
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# .env values fill in anything the process environment leaves unset
load_dotenv()

TRUTHY = ("1", "true", "yes", "on")


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %s", name, raw, default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# =============================================================================
# Sections
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Where posts are stored. SQLite unless ``DATABASE_URL`` says otherwise."""
    url: str = field(default_factory=lambda: _env("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: _env("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: _env("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: _env_int("DB_PORT", 5432))
    user: str = field(default_factory=lambda: _env("DB_USER"))
    password: str = field(default_factory=lambda: _env("DB_PASSWORD"))

    @property
    def is_sqlite(self) -> bool:
        return self.url.lower().startswith("sqlite")

    def as_django(self) -> dict:
        """The ``DATABASES["default"]`` entry for this section."""
        if self.is_sqlite:
            return {"ENGINE": "django.db.backends.sqlite3", "NAME": self.name}
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": self.name,
            "HOST": self.host,
            "PORT": self.port,
            "USER": self.user,
            "PASSWORD": self.password,
        }


@dataclass(frozen=True)
class BrokerConfig:
    """Celery broker used for view counting."""
    url: str = field(default_factory=lambda: _env("CELERY_BROKER_URL", "redis://localhost:6379/0"))
    result_backend: str = field(default_factory=lambda: _env("CELERY_RESULT_BACKEND", "redis://localhost:6379/0"))


@dataclass(frozen=True)
class SecurityConfig:
    secret_key: str = field(default_factory=lambda: _env("SECRET_KEY", "django-insecure-quill-dev-key"))
    allowed_hosts: List[str] = field(default_factory=lambda: _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1"))
    csrf_trusted_origins: List[str] = field(
        default_factory=lambda: _env_list("CSRF_TRUSTED_ORIGINS", "http://localhost:8000")
    )

    @property
    def has_strong_key(self) -> bool:
        return len(self.secret_key) >= 50 and not self.secret_key.startswith("django-insecure")


@dataclass(frozen=True)
class ContentConfig:
    """Post listing, redaction and engagement settings."""
    default_page_size: int = field(default_factory=lambda: _env_int("POSTS_DEFAULT_PAGE_SIZE", 10))
    # Replaces the body of password-protected posts in every projection
    redacted_placeholder: str = field(default_factory=lambda: _env("POSTS_REDACTED_PLACEHOLDER"))
    track_views: bool = field(default_factory=lambda: _env_bool("POSTS_TRACK_VIEWS", True))


@dataclass(frozen=True)
class AppConfig:
    environment: str = field(default_factory=lambda: _env("DJANGO_ENV", "development").lower())
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", True))

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    broker: BrokerConfig = field(default_factory=BrokerConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    content: ContentConfig = field(default_factory=ContentConfig)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> List[str]:
        """
        Problems with the loaded configuration, each prefixed with its
        severity (CRITICAL, WARNING or INFO).
        """
        issues = []

        if self.content.default_page_size < 1:
            issues.append("CRITICAL: POSTS_DEFAULT_PAGE_SIZE must be a positive integer")
        if not self.content.track_views:
            issues.append("INFO: Post view tracking disabled (POSTS_TRACK_VIEWS)")

        if not self.is_production:
            return issues

        if not self.security.has_strong_key:
            issues.append("CRITICAL: SECRET_KEY is a development key")
        if self.debug:
            issues.append("WARNING: DEBUG is on in production")
        if self.database.is_sqlite:
            issues.append("WARNING: production is running on SQLite")
        return issues

    def log_status(self) -> None:
        logger.info(
            "Quill config: env=%s debug=%s database=%s page_size=%s track_views=%s",
            self.environment,
            self.debug,
            "sqlite" if self.database.is_sqlite else self.database.host,
            self.content.default_page_size,
            self.content.track_views,
        )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """The process-wide configuration, loaded on first use."""
    return AppConfig()


config = get_config()
