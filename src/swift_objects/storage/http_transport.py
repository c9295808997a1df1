"""
HTTP transport for the Swift object API.

Sends prepared ``httpx.Request`` objects with the account token attached,
retries timed out requests and maps failures onto the object store error
hierarchy.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..settings import Settings
from .errors import TransportError, raise_for_status
from .headers import X_AUTH_TOKEN

__all__ = ["HttpTransport"]

logger = logging.getLogger(__name__)

USER_AGENT = "swift-objects/0.1.0"


class HttpTransport:
    """
    Transport implementation on top of ``httpx.Client``.

    Retries only connect/read timeouts (``http_retry`` extra attempts with
    exponential backoff). Non-2xx responses are raised as ``HttpStatusError``
    and never retried.
    """

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        """
        Initialize transport.

        Args:
            settings: Timeout, retry and token configuration
            client: Pre-built client (tests pass one using httpx.MockTransport)
        """
        self._settings = settings
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(settings.http_timeout_s, connect=5.0),
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )
        logger.debug(f"HTTP transport timeout: {settings.http_timeout_s}s, retry: {settings.http_retry}")

    def send(self, request: httpx.Request) -> httpx.Response:
        if self._settings.auth_token and X_AUTH_TOKEN not in request.headers:
            request.headers[X_AUTH_TOKEN] = self._settings.auth_token

        retrying = Retrying(
            stop=stop_after_attempt(self._settings.http_retry + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TimeoutException),
            reraise=True,
        )

        try:
            response = retrying(self._client.send, request)
        except httpx.RequestError as e:
            raise TransportError(f"Network error on {request.method} {request.url}: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return raise_for_status(response, request)

    def close(self):
        """Close HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
