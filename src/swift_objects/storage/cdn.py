"""
CDN collaborator for CDN-enabled containers.

Reads the container's CDN URIs from the CDN management endpoint and issues
edge purges. CDN enable/disable is managed outside this package.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional
from urllib.parse import quote

import httpx

from .base import Transport, UrlType
from .headers import (
    X_CDN_ENABLED,
    X_CDN_IOS_URI,
    X_CDN_SSL_URI,
    X_CDN_STREAMING_URI,
    X_CDN_URI,
    X_PURGE_EMAIL,
)
from .paths import quote_object_name

__all__ = ["CdnContainer"]

logger = logging.getLogger(__name__)

_URI_HEADERS = {
    UrlType.CDN: X_CDN_URI,
    UrlType.SSL: X_CDN_SSL_URI,
    UrlType.STREAMING: X_CDN_STREAMING_URI,
    UrlType.IOS_STREAMING: X_CDN_IOS_URI,
}


class CdnContainer:
    """
    CDN view of one container.

    CDN state is fetched lazily with one HEAD on first use and cached;
    ``refresh()`` fetches it again.
    """

    def __init__(self, transport: Transport, cdn_url: str, container_name: str):
        self._transport = transport
        self._url = f"{cdn_url.rstrip('/')}/{quote(container_name, safe='')}"
        self._enabled: Optional[bool] = None
        self._uris: Dict[UrlType, str] = {}

    @property
    def url(self) -> str:
        return self._url

    def refresh(self) -> None:
        response = self._transport.send(httpx.Request("HEAD", self._url))
        headers = response.headers
        self._enabled = headers.get(X_CDN_ENABLED, "").lower() == "true"
        self._uris = {
            url_type: headers[header].rstrip("/")
            for url_type, header in _URI_HEADERS.items()
            if headers.get(header)
        }
        logger.debug(f"CDN state for {self._url}: enabled={self._enabled}")

    def is_cdn_enabled(self) -> bool:
        if self._enabled is None:
            self.refresh()
        return bool(self._enabled)

    def public_url(self, name: str, url_type: UrlType = UrlType.CDN) -> Optional[str]:
        if not self.is_cdn_enabled():
            return None
        base = self._uris.get(UrlType(url_type))
        if not base:
            return None
        return f"{base}/{quote_object_name(name)}"

    def purge(self, name: str, emails: Iterable[str] = ()) -> httpx.Response:
        headers = {}
        recipients = [email for email in emails if email]
        if recipients:
            headers[X_PURGE_EMAIL] = ", ".join(recipients)
        url = f"{self._url}/{quote_object_name(name)}"
        logger.debug(f"Purging {url} from CDN")
        return self._transport.send(httpx.Request("DELETE", url, headers=headers))
