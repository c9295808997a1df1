"""
Temporary URL generation.

Builds time-limited, HMAC-signed URLs that grant unauthenticated access to a
single object for a single HTTP method.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional
from urllib.parse import unquote, urlencode, urlsplit

from .signing import HmacSigner, canonical_string
from .storage.errors import MissingNameError, UnsupportedMethodError
from .storage.headers import TEMP_URL_EXPIRES, TEMP_URL_SIG

if TYPE_CHECKING:
    from .data_object import DataObject

__all__ = ["SignedUrlRequest", "TemporaryUrlBuilder", "ALLOWED_METHODS"]

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "PUT", "HEAD", "POST"})


@dataclass(frozen=True)
class SignedUrlRequest:
    """
    Parameters of one temporary URL.

    Invariants:
    - method: exactly one of GET, PUT, HEAD, POST (case-sensitive)
    - expires_in: positive number of seconds
    """
    method: str
    expires_in: int
    force_public: bool = False

    def __post_init__(self):
        if self.method not in ALLOWED_METHODS:
            raise UnsupportedMethodError(self.method)
        if int(self.expires_in) <= 0:
            raise ValueError(f"expires_in must be positive, got {self.expires_in}")


class TemporaryUrlBuilder:
    """
    Signs object URLs with the account's temporary URL key.

    The key comes from the account's secret cache, so at most one account
    HEAD is issued for the lifetime of the account.
    """

    def __init__(self, signer: Optional[HmacSigner] = None,
                 clock: Callable[[], float] = time.time):
        self._signer = signer or HmacSigner()
        self._clock = clock

    def build(self, obj: DataObject, method: str, expires_in: int,
              force_public: bool = False) -> str:
        """
        Build a signed temporary URL for ``obj``.

        Args:
            obj: Object to grant access to
            method: HTTP verb the URL is valid for
            expires_in: Lifetime in seconds from now
            force_public: Use the public endpoint even when the account is
                configured for internal URLs

        Returns:
            Object URL with temp_url_sig and temp_url_expires query parameters

        Raises:
            UnsupportedMethodError: If method is not GET, PUT, HEAD or POST
            MissingNameError: If the object has no name
            SigningSecretUnavailableError: If the account has no key configured
        """
        request = SignedUrlRequest(method=method, expires_in=expires_in, force_public=force_public)

        if not obj.name:
            raise MissingNameError("Cannot build a temporary URL for an object without a name")

        account = obj.container.account
        internal = account.uses_internal_url and not request.force_public
        url = obj.container.object_url(obj.name, internal=internal)

        secret = account.temp_url_secret()
        expires = int(self._clock()) + int(request.expires_in)
        path = unquote(urlsplit(url).path)

        signature = self._signer.sign(secret, canonical_string(request.method, expires, path))
        logger.debug(f"Signed {request.method} URL for {path} expiring at {expires}")

        query = urlencode({TEMP_URL_SIG: signature, TEMP_URL_EXPIRES: expires})
        return f"{url}?{query}"
