"""
Account context: endpoints, containers and the temporary URL key.

The account owns the transport and endpoint resolver shared by its
containers and objects, and caches the temporary URL signing secret.
"""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Optional

import httpx

from .settings import Settings
from .storage.base import EndpointResolver, Transport
from .storage.endpoints import CatalogEndpointResolver
from .storage.errors import SigningSecretUnavailableError
from .storage.headers import X_ACCOUNT_META_TEMP_URL_KEY

if TYPE_CHECKING:
    from .container import Container

__all__ = ["Account", "TempUrlSecretCache"]

logger = logging.getLogger(__name__)


class TempUrlSecretCache:
    """
    Process-wide cache for an account's temporary URL key.

    The first ``get()`` runs the fetch under a lock so concurrent first use
    fetches at most once. The cached value never expires on its own; call
    ``clear()`` after rotating the key.
    """

    def __init__(self, fetch: Callable[[], Optional[str]]):
        self._fetch = fetch
        self._lock = threading.Lock()
        self._secret: Optional[str] = None

    def get(self) -> str:
        secret = self._secret
        if secret is not None:
            return secret

        with self._lock:
            if self._secret is None:
                fetched = self._fetch()
                if not fetched:
                    raise SigningSecretUnavailableError(
                        f"Account has no {X_ACCOUNT_META_TEMP_URL_KEY} configured"
                    )
                self._secret = fetched
            else:
                logger.debug("Temporary URL key fetched by another thread")
            return self._secret

    def prime(self, secret: str) -> None:
        with self._lock:
            self._secret = secret

    def clear(self) -> None:
        with self._lock:
            self._secret = None


class Account:
    """
    Storage account handle.

    Holds no object state; containers and data objects keep a reference to
    it to reach the transport, the resolver and the signing secret.
    """

    def __init__(self, transport: Transport, resolver: EndpointResolver,
                 cdn_url: Optional[str] = None):
        self.transport = transport
        self.resolver = resolver
        self.cdn_url = cdn_url
        self._secret_cache = TempUrlSecretCache(self._fetch_temp_url_secret)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[Transport] = None) -> Account:
        if transport is None:
            from .storage.http_transport import HttpTransport
            transport = HttpTransport(settings)
        return cls(
            transport=transport,
            resolver=CatalogEndpointResolver.from_settings(settings),
            cdn_url=settings.cdn_url,
        )

    @property
    def uses_internal_url(self) -> bool:
        return self.resolver.prefers_internal

    def url(self, internal: Optional[bool] = None) -> str:
        if internal is None:
            internal = self.uses_internal_url
        return self.resolver.account_url(internal=internal)

    def container(self, name: str) -> Container:
        from .container import Container

        if not name:
            raise ValueError("Container name cannot be empty")
        return Container(self, name)

    # Temporary URL key

    def temp_url_secret(self) -> str:
        """
        Return the account's temporary URL key.

        Raises:
            SigningSecretUnavailableError: If the account has no key configured
            TransportError: If the account lookup fails
        """
        return self._secret_cache.get()

    def clear_temp_url_secret(self) -> None:
        """Forget the cached key so the next temporary URL fetches it again."""
        self._secret_cache.clear()

    def set_temp_url_secret(self, secret: str) -> httpx.Response:
        """Store a new temporary URL key on the account and cache it."""
        if not secret:
            raise ValueError("Temporary URL key cannot be empty")
        response = self.transport.send(
            httpx.Request("POST", self.url(), headers={X_ACCOUNT_META_TEMP_URL_KEY: secret})
        )
        self._secret_cache.prime(secret)
        return response

    def _fetch_temp_url_secret(self) -> Optional[str]:
        logger.debug("Fetching temporary URL key from account metadata")
        response = self.transport.send(httpx.Request("HEAD", self.url()))
        return response.headers.get(X_ACCOUNT_META_TEMP_URL_KEY)
