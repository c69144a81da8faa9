"""
Configuration Layer
===================

Every environment variable the API reads is declared here, once, as a
frozen dataclass field. Settings modules and services import ``config``;
nothing else calls os.getenv().

Usage:
    from intellibuy.config import config

    config.apis.openai_api_key      # query analysis
    config.search.cache_ttl         # seconds search results stay cached
    config.is_production
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


def _env(name: str, default: str = ""):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_int(name: str, default: int):
    return field(default_factory=lambda: int(os.getenv(name, str(default))))


def _env_list(name: str, default: str):
    """Comma-separated variable; blank entries are dropped."""
    return field(default_factory=lambda: [
        item.strip() for item in os.getenv(name, default).split(",") if item.strip()
    ])


# =============================================================================
# Sections
# =============================================================================

@dataclass(frozen=True)
class APIKeysConfig:
    """Third-party API credentials."""

    openai_api_key: str = _env("OPENAI_API_KEY")
    openai_model: str = _env("OPENAI_MODEL", "gpt-3.5-turbo")

    @property
    def openai_enabled(self) -> bool:
        return bool(self.openai_api_key)


@dataclass(frozen=True)
class SecurityConfig:
    secret_key: str = _env("SECRET_KEY", "django-insecure-intellibuy-dev-key")
    allowed_hosts: List[str] = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1")
    cors_origins: List[str] = _env_list("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    csrf_trusted_origins: List[str] = _env_list("CSRF_TRUSTED_ORIGINS", "http://localhost:3000")

    @property
    def is_secure_key(self) -> bool:
        """Django's generated keys are 50 characters; dev keys say "insecure"."""
        return len(self.secret_key) >= 50 and "insecure" not in self.secret_key.lower()


@dataclass(frozen=True)
class SearchConfig:
    """Product search tuning."""
    cache_ttl: int = _env_int("SEARCH_CACHE_TTL", 300)
    max_query_length: int = _env_int("SEARCH_MAX_QUERY_LENGTH", 200)
    default_page_size: int = _env_int("SEARCH_DEFAULT_PAGE_SIZE", 20)
    max_page_size: int = _env_int("SEARCH_MAX_PAGE_SIZE", 50)


@dataclass(frozen=True)
class AppConfig:
    environment: str = _env("DJANGO_ENV", "development")
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    apis: APIKeysConfig = field(default_factory=APIKeysConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Problems with the current environment, each prefixed with its
        severity: ``CRITICAL:``, ``WARNING:`` or ``INFO:``.
        """
        issues = []

        if self.is_production and not self.security.is_secure_key:
            issues.append("CRITICAL: SECRET_KEY is a development key")
        if self.is_production and self.debug:
            issues.append("WARNING: DEBUG is enabled in production")

        if self.search.cache_ttl < 0:
            issues.append("WARNING: SEARCH_CACHE_TTL is negative, search caching disabled")
        if self.search.default_page_size > self.search.max_page_size:
            issues.append("WARNING: SEARCH_DEFAULT_PAGE_SIZE exceeds SEARCH_MAX_PAGE_SIZE")

        if not self.apis.openai_enabled:
            issues.append("INFO: OPENAI_API_KEY not set, query analysis uses the rule-based parser")

        return issues


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Process-wide configuration, read from the environment once."""
    return AppConfig()


config = get_config()
