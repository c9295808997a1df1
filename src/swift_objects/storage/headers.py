"""
Header names read and written by the object resource.

The system metadata table is the single place where MetadataStore fields are
mapped to wire headers. Header lookups go through ``httpx.Headers`` so
names are matched case-insensitively.
"""
from __future__ import annotations

from typing import Tuple

CONTENT_TYPE = "Content-Type"
CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LENGTH = "Content-Length"
ETAG = "ETag"
LAST_MODIFIED = "Last-Modified"
X_DELETE_AT = "X-Delete-At"
X_OBJECT_MANIFEST = "X-Object-Manifest"
X_ACCOUNT_META_TEMP_URL_KEY = "X-Account-Meta-Temp-URL-Key"
X_AUTH_TOKEN = "X-Auth-Token"
DESTINATION = "Destination"

# CDN management headers
X_CDN_ENABLED = "X-Cdn-Enabled"
X_CDN_URI = "X-Cdn-Uri"
X_CDN_SSL_URI = "X-Cdn-Ssl-Uri"
X_CDN_STREAMING_URI = "X-Cdn-Streaming-Uri"
X_CDN_IOS_URI = "X-Cdn-Ios-Uri"
X_PURGE_EMAIL = "X-Purge-Email"

OBJECT_META_PREFIX = "X-Object-Meta-"

# (field name, header name) for writable string fields, in emission order
WRITABLE_STRING_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("content_type", CONTENT_TYPE),
    ("content_disposition", CONTENT_DISPOSITION),
    ("content_encoding", CONTENT_ENCODING),
)

# Query parameters of a signed temporary URL
TEMP_URL_SIG = "temp_url_sig"
TEMP_URL_EXPIRES = "temp_url_expires"


def meta_header(key: str) -> str:
    """Return the custom metadata header for ``key``."""
    return f"{OBJECT_META_PREFIX}{key}"


def meta_key(header: str) -> str | None:
    """Return the lower-cased metadata key for a custom header, or None."""
    if header.lower().startswith(OBJECT_META_PREFIX.lower()):
        return header[len(OBJECT_META_PREFIX):].lower()
    return None


__all__ = [
    "CONTENT_TYPE",
    "CONTENT_DISPOSITION",
    "CONTENT_ENCODING",
    "CONTENT_LENGTH",
    "ETAG",
    "LAST_MODIFIED",
    "X_DELETE_AT",
    "X_OBJECT_MANIFEST",
    "X_ACCOUNT_META_TEMP_URL_KEY",
    "X_AUTH_TOKEN",
    "DESTINATION",
    "X_CDN_ENABLED",
    "X_CDN_URI",
    "X_CDN_SSL_URI",
    "X_CDN_STREAMING_URI",
    "X_CDN_IOS_URI",
    "X_PURGE_EMAIL",
    "OBJECT_META_PREFIX",
    "WRITABLE_STRING_FIELDS",
    "TEMP_URL_SIG",
    "TEMP_URL_EXPIRES",
    "meta_header",
    "meta_key",
]
