"""
Collaborator interfaces for the object resource.

These protocols define the boundary between the object resource core and the
HTTP, endpoint and CDN implementations, enabling clean dependency injection
and testing with fakes.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Protocol, runtime_checkable

import httpx


class UrlType(str, Enum):
    """Public CDN URL variants."""
    CDN = "cdn"
    SSL = "ssl"
    STREAMING = "streaming"
    IOS_STREAMING = "ios_streaming"


__all__ = ["UrlType", "Transport", "EndpointResolver", "ObjectSizer", "CdnCollaborator"]


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending HTTP requests to the object store."""

    def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and return the response.

        Args:
            request: Fully built request (method, URL, headers, body)

        Returns:
            Response with a 2xx status

        Raises:
            HttpStatusError: If the service answers with a non-2xx status
            ObjectNotFoundError: If the service answers 404
            TransportError: For network failures
        """
        ...


@runtime_checkable
class EndpointResolver(Protocol):
    """Protocol for choosing public or internal storage endpoints."""

    @property
    def prefers_internal(self) -> bool:
        """True when the account is configured for internal URLs."""
        ...

    def account_url(self, *, internal: bool) -> str:
        """Return the account (storage) URL."""
        ...

    def resolve(self, container: str, obj: Optional[str] = None, *, internal: bool) -> str:
        """
        Return the URL of a container, or of an object within it.

        Args:
            container: Container name
            obj: Object name, or None for the container URL
            internal: Use the internal ("ServiceNet") endpoint

        Returns:
            Absolute URL with each object name segment URL-encoded
        """
        ...


@runtime_checkable
class ObjectSizer(Protocol):
    """Protocol for the size check used by the symlink manager."""

    def object_size(self, name: str) -> int:
        """
        Return the content length of an object.

        Raises:
            ObjectNotFoundError: If the object does not exist
            TransportError: For other failures
        """
        ...


@runtime_checkable
class CdnCollaborator(Protocol):
    """Protocol for CDN-backed public URLs and edge purges."""

    def is_cdn_enabled(self) -> bool:
        ...

    def public_url(self, name: str, url_type: UrlType = UrlType.CDN) -> Optional[str]:
        """Return the public URL of an object, or None if unavailable."""
        ...

    def purge(self, name: str, emails: Iterable[str] = ()) -> httpx.Response:
        """Purge an object from the CDN edge, notifying ``emails`` when done."""
        ...
