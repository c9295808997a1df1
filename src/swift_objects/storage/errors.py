"""
Object store error classes.

Provides a clear taxonomy of errors that can occur while working with a
stored object. Local precondition failures are raised before any request is
issued; transport errors are mapped from HTTP status codes and httpx
exceptions so callers see one consistent hierarchy.

Every error carries an ``ErrorKind`` tag so callers can branch on
``exc.kind`` instead of on the concrete class.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

import httpx


class ErrorKind(str, Enum):
    """Tag identifying the kind of failure."""
    MISSING_NAME = "missing_name"
    UNSUPPORTED_METHOD = "unsupported_method"
    OBJECT_NOT_EMPTY = "object_not_empty"
    SIGNING_SECRET_UNAVAILABLE = "signing_secret_unavailable"
    PSEUDO_DIRECTORY = "pseudo_directory"
    CDN_NOT_AVAILABLE = "cdn_not_available"
    TRANSPORT = "transport"


class ObjectStoreError(Exception):
    """
    Base class for all object store errors.

    Subclasses set ``kind`` so the error can be handled as a tagged value.
    """
    kind: ErrorKind = ErrorKind.TRANSPORT


class MissingNameError(ObjectStoreError, ValueError):
    """
    An operation that addresses an object was attempted without a name.

    Raised when:
    - Building the object URL or a temporary URL for an unnamed object
    - Copying to or from an empty path
    - Creating a symlink with an empty source or target path
    """
    kind = ErrorKind.MISSING_NAME


class UnsupportedMethodError(ObjectStoreError, ValueError):
    """
    Temporary URL requested for an HTTP verb that cannot be signed.

    Only GET, PUT, HEAD and POST are accepted.
    """
    kind = ErrorKind.UNSUPPORTED_METHOD

    def __init__(self, method: str):
        super().__init__(f"Unsupported temporary URL method: {method!r}")
        self.method = method


class ObjectNotEmptyError(ObjectStoreError):
    """
    Symlink creation attempted against an object that has content.

    Raised after the size check and before the manifest write is issued.
    """
    kind = ErrorKind.OBJECT_NOT_EMPTY

    def __init__(self, path: str, size: int):
        super().__init__(f"Object {path} is not empty ({size} bytes)")
        self.path = path
        self.size = size


class SigningSecretUnavailableError(ObjectStoreError):
    """The account has no temporary URL key configured."""
    kind = ErrorKind.SIGNING_SECRET_UNAVAILABLE


class PseudoDirectoryError(ObjectStoreError):
    """Content operation attempted on a pseudo-directory listing entry."""
    kind = ErrorKind.PSEUDO_DIRECTORY


class CdnNotAvailableError(ObjectStoreError):
    """The container has no CDN collaborator configured."""
    kind = ErrorKind.CDN_NOT_AVAILABLE


class TransportError(ObjectStoreError):
    """
    Network or service failure reported by the transport.

    The core never interprets or retries these; they propagate unchanged.
    """
    kind = ErrorKind.TRANSPORT


class HttpStatusError(TransportError):
    """
    Service answered with a non-2xx status.

    Raised when:
    - HTTP 4xx (client error, including 409 Conflict for non-empty deletes)
    - HTTP 5xx (server error)
    """

    def __init__(self, message: str, response: httpx.Response):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class ObjectNotFoundError(HttpStatusError):
    """
    Resource not found.

    Raised when:
    - HTTP 404 Not Found (object, container or account doesn't exist)
    """
    pass


def raise_for_status(response: httpx.Response, request: Optional[httpx.Request] = None) -> httpx.Response:
    """
    Map a non-2xx response onto the error hierarchy.

    Args:
        response: Response to check
        request: Request that produced it (used for the message only)

    Returns:
        The response unchanged when the status is 2xx

    Raises:
        ObjectNotFoundError: For HTTP 404
        HttpStatusError: For any other non-2xx status
    """
    if 200 <= response.status_code < 300:
        return response

    target = f"{request.method} {request.url}" if request is not None else "request"
    message = f"{target} failed with HTTP {response.status_code}"
    if response.status_code == 404:
        raise ObjectNotFoundError(message, response)
    raise HttpStatusError(message, response)


__all__ = [
    "ErrorKind",
    "ObjectStoreError",
    "MissingNameError",
    "UnsupportedMethodError",
    "ObjectNotEmptyError",
    "SigningSecretUnavailableError",
    "PseudoDirectoryError",
    "CdnNotAvailableError",
    "TransportError",
    "HttpStatusError",
    "ObjectNotFoundError",
    "raise_for_status",
]
