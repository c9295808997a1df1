"""
Settings and configuration for swift-objects.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables at client construction time.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "create_settings_from_env", "PUBLIC_URL", "INTERNAL_URL"]

PUBLIC_URL = "publicURL"
INTERNAL_URL = "internalURL"

_URL_PATTERN = r"^https?://[a-zA-Z0-9.-]+(?::[0-9]+)?(?:/.*)?$"


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the object store client.

    Storage Settings:
        storage_url: Public storage (account) URL (required)
        internal_storage_url: Internal ("ServiceNet") storage URL; derived from
            storage_url when not given
        url_type: Which endpoint to use by default (publicURL | internalURL)
        auth_token: Token sent as X-Auth-Token

    CDN Settings:
        cdn_url: CDN management URL; CDN operations are unavailable without it

    HTTP Settings:
        http_timeout_s: HTTP request timeout in seconds
        http_retry: Number of retries for timed out requests (0=no retry)
    """
    storage_url: str
    internal_storage_url: Optional[str] = None
    url_type: str = PUBLIC_URL
    auth_token: Optional[str] = None
    cdn_url: Optional[str] = None
    http_timeout_s: float = 30.0
    http_retry: int = 0

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.storage_url:
            raise ValueError("storage_url is required")

        if not re.match(_URL_PATTERN, self.storage_url):
            raise ValueError(f"Invalid storage_url format: {self.storage_url}")

        if self.internal_storage_url and not re.match(_URL_PATTERN, self.internal_storage_url):
            raise ValueError(f"Invalid internal_storage_url format: {self.internal_storage_url}")

        if self.cdn_url and not re.match(_URL_PATTERN, self.cdn_url):
            raise ValueError(f"Invalid cdn_url format: {self.cdn_url}")

        if self.url_type not in (PUBLIC_URL, INTERNAL_URL):
            raise ValueError(f"url_type must be {PUBLIC_URL} or {INTERNAL_URL}, got {self.url_type}")

        if self.http_timeout_s <= 0:
            raise ValueError(f"http_timeout_s must be positive, got {self.http_timeout_s}")

        if self.http_retry < 0:
            raise ValueError(f"http_retry must be non-negative, got {self.http_retry}")

    @property
    def prefers_internal(self) -> bool:
        return self.url_type == INTERNAL_URL


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - SWIFT_STORAGE_URL (required)
        - SWIFT_INTERNAL_STORAGE_URL (optional)
        - SWIFT_URL_TYPE (default: publicURL)
        - SWIFT_AUTH_TOKEN (optional)
        - SWIFT_CDN_URL (optional)
        - SWIFT_HTTP_TIMEOUT (default: 30.0)
        - SWIFT_HTTP_RETRY (default: 0)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid or required values missing

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def get_float(key: str, default: float) -> float:
        value = os.getenv(key)
        return float(value) if value else default

    def get_int(key: str, default: int) -> int:
        value = os.getenv(key)
        return int(value) if value else default

    storage_url = os.getenv("SWIFT_STORAGE_URL")
    if not storage_url:
        raise ValueError("SWIFT_STORAGE_URL environment variable is required")

    return Settings(
        storage_url=storage_url,
        internal_storage_url=os.getenv("SWIFT_INTERNAL_STORAGE_URL") or None,
        url_type=os.getenv("SWIFT_URL_TYPE", PUBLIC_URL),
        auth_token=os.getenv("SWIFT_AUTH_TOKEN") or None,
        cdn_url=os.getenv("SWIFT_CDN_URL") or None,
        http_timeout_s=get_float("SWIFT_HTTP_TIMEOUT", 30.0),
        http_retry=get_int("SWIFT_HTTP_RETRY", 0),
    )
