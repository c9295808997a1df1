"""
Endpoint resolution for public and internal storage URLs.

Swift deployments commonly expose the same account twice: once on the public
network and once on an internal ("ServiceNet") network whose host carries a
``snet-`` prefix. The resolver picks between the two per request.
"""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote, urlsplit, urlunsplit

from ..settings import Settings
from .paths import quote_object_name

__all__ = ["CatalogEndpointResolver", "internal_url_for", "INTERNAL_HOST_PREFIX"]

logger = logging.getLogger(__name__)

INTERNAL_HOST_PREFIX = "snet-"


def internal_url_for(public_url: str) -> str:
    """
    Derive the internal endpoint from a public storage URL.

    Examples:
        >>> internal_url_for("https://storage101.iad3.clouddrive.com/v1/AUTH_abc")
        'https://snet-storage101.iad3.clouddrive.com/v1/AUTH_abc'
    """
    parts = urlsplit(public_url)
    if parts.netloc.startswith(INTERNAL_HOST_PREFIX):
        return public_url
    return urlunsplit(parts._replace(netloc=f"{INTERNAL_HOST_PREFIX}{parts.netloc}"))


class CatalogEndpointResolver:
    """
    EndpointResolver backed by a public URL and an optional internal URL.

    The internal URL defaults to the public URL with a ``snet-`` host prefix.
    """

    def __init__(self, public_url: str, internal_url: Optional[str] = None,
                 prefer_internal: bool = False):
        self._public_url = public_url.rstrip("/")
        self._internal_url = (internal_url or internal_url_for(public_url)).rstrip("/")
        self._prefer_internal = prefer_internal

    @classmethod
    def from_settings(cls, settings: Settings) -> CatalogEndpointResolver:
        return cls(
            public_url=settings.storage_url,
            internal_url=settings.internal_storage_url,
            prefer_internal=settings.prefers_internal,
        )

    @property
    def prefers_internal(self) -> bool:
        return self._prefer_internal

    def account_url(self, *, internal: bool) -> str:
        return self._internal_url if internal else self._public_url

    def resolve(self, container: str, obj: Optional[str] = None, *, internal: bool) -> str:
        url = f"{self.account_url(internal=internal)}/{quote(container, safe='')}"
        if obj:
            url = f"{url}/{quote_object_name(obj)}"
        return url
