"""
HMAC signing for temporary URLs.

Implements the Swift tempurl signature:
- Canonical string: "{method}\\n{expires}\\n{path}"
- Signature: hex digest of HMAC-SHA1(secret, canonical_string)

SECURITY: Never log secrets or signatures.
"""
from __future__ import annotations

import hashlib
import hmac
from typing import Callable, Union

__all__ = ["HmacSigner", "canonical_string", "sign"]

Secret = Union[bytes, str]


def canonical_string(method: str, expires: int, path: str) -> str:
    """
    Build the canonical string signed for a temporary URL.

    The format must match the server byte for byte; no re-ordering or
    re-encoding is applied.
    """
    return f"{method}\n{expires}\n{path}"


def sign(secret: Secret, canonical: str, digestmod: Callable = hashlib.sha1) -> str:
    """
    Compute the HMAC signature of a canonical string.

    Args:
        secret: Account temporary URL key (str is UTF-8 encoded)
        canonical: Canonical string from ``canonical_string``
        digestmod: Hash constructor, SHA1 for Swift

    Returns:
        Lower-case hex digest
    """
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    return hmac.new(key=key, msg=canonical.encode("utf-8"), digestmod=digestmod).hexdigest()


class HmacSigner:
    """Deterministic signer injected into the temporary URL builder."""

    def __init__(self, digestmod: Callable = hashlib.sha1):
        self._digestmod = digestmod

    def sign(self, secret: Secret, canonical: str) -> str:
        return sign(secret, canonical, self._digestmod)
