"""
Typed system and custom metadata for one stored object.

MetadataStore keeps a fixed set of optional fields plus a case-insensitive
custom metadata mapping, tracks which writable fields were changed locally,
and converts to and from HTTP headers through the table in
``storage.headers``.
"""
from __future__ import annotations

import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, Mapping, Optional, Set

import httpx

from .storage.headers import (
    CONTENT_LENGTH,
    ETAG,
    LAST_MODIFIED,
    WRITABLE_STRING_FIELDS,
    X_DELETE_AT,
    X_OBJECT_MANIFEST,
    meta_header,
    meta_key,
)

__all__ = ["MetadataStore", "to_timestamp", "from_timestamp"]

DELETE_AT = "delete_at"
CUSTOM = "custom"


def to_timestamp(value: datetime) -> int:
    """Convert a datetime to integer Unix epoch seconds (naive = local time)."""
    return int(value.timestamp())


def from_timestamp(value: int | float | str) -> datetime:
    """Convert Unix epoch seconds to an aware UTC datetime, second precision."""
    return datetime.fromtimestamp(int(float(value)), tz=timezone.utc)


class MetadataStore:
    """
    Local metadata state of a data object.

    Invariants:
    - delete_at is always stored as an absolute, second-precision UTC datetime
    - content_length, etag, manifest and last_modified only change when the
      server state is applied (or, for manifest, when a symlink is written)
    - custom keys are stored lower-cased
    - dirty flags are cleared by ``mark_clean`` only after a successful flush
    """

    def __init__(self) -> None:
        self.content_type: Optional[str] = None
        self.content_disposition: Optional[str] = None
        self.content_encoding: Optional[str] = None
        self._delete_at: Optional[datetime] = None
        self._content_length: Optional[int] = None
        self._etag: Optional[str] = None
        self._manifest: Optional[str] = None
        self._last_modified: Optional[datetime] = None
        self._custom: Dict[str, str] = {}
        self._dirty: Set[str] = set()

    # Writable system fields

    def set_field(self, field: str, value: str) -> None:
        """
        Set one of the writable string fields and mark it dirty.

        Clearing a field (None) is not supported.
        """
        if field not in dict(WRITABLE_STRING_FIELDS):
            raise ValueError(f"Unknown writable metadata field: {field}")
        if value is None:
            raise ValueError(f"Metadata field {field} cannot be cleared")
        setattr(self, field, value)
        self._dirty.add(field)

    @property
    def delete_at(self) -> Optional[datetime]:
        return self._delete_at

    def set_delete_at(self, when: Optional[datetime]) -> None:
        self._delete_at = from_timestamp(to_timestamp(when)) if when is not None else None
        self._dirty.add(DELETE_AT)

    def set_delete_after(self, seconds: int, now: Optional[float] = None) -> None:
        """Schedule deletion ``seconds`` from ``now`` (defaults to wall-clock time)."""
        if seconds < 0:
            raise ValueError(f"seconds must be non-negative, got {seconds}")
        current = time.time() if now is None else now
        self._delete_at = from_timestamp(int(current) + int(seconds))
        self._dirty.add(DELETE_AT)

    # Read-only fields

    @property
    def content_length(self) -> Optional[int]:
        return self._content_length

    @property
    def etag(self) -> Optional[str]:
        return self._etag

    @property
    def manifest(self) -> Optional[str]:
        return self._manifest

    @property
    def last_modified(self) -> Optional[datetime]:
        return self._last_modified

    def set_manifest(self, manifest: Optional[str]) -> None:
        """Record a manifest written by the symlink manager (never flushed)."""
        self._manifest = manifest

    # Custom metadata

    @property
    def custom(self) -> Dict[str, str]:
        return dict(self._custom)

    def merge_custom(self, pairs: Mapping[str, str]) -> None:
        for key, value in pairs.items():
            self._custom[key.lower()] = str(value)
        if pairs:
            self._dirty.add(CUSTOM)

    # Dirty tracking

    @property
    def dirty_fields(self) -> Set[str]:
        return set(self._dirty)

    def is_dirty(self) -> bool:
        return bool(self._dirty)

    def mark_clean(self) -> None:
        self._dirty.clear()

    # Header (de)serialization

    def dirty_headers(self) -> Dict[str, str]:
        """
        Render the headers for a metadata flush.

        Dirty system fields that hold a value are emitted. Custom metadata is
        always sent in full because a Swift POST replaces the object's custom
        metadata wholesale.
        """
        headers: Dict[str, str] = {}
        for field, header in WRITABLE_STRING_FIELDS:
            value = getattr(self, field)
            if field in self._dirty and value is not None:
                headers[header] = value
        if DELETE_AT in self._dirty and self._delete_at is not None:
            headers[X_DELETE_AT] = str(to_timestamp(self._delete_at))
        for key, value in self._custom.items():
            headers[meta_header(key)] = value
        return headers

    def apply_headers(self, headers: Mapping[str, str]) -> None:
        """
        Replace all local state with the server's headers.

        Every recognised header sets its field and every missing header
        clears it; this is a wholesale replace, not a merge.
        """
        headers = httpx.Headers(headers)

        for field, header in WRITABLE_STRING_FIELDS:
            setattr(self, field, headers.get(header) or None)

        delete_at = headers.get(X_DELETE_AT)
        self._delete_at = from_timestamp(delete_at) if delete_at else None

        length = headers.get(CONTENT_LENGTH)
        self._content_length = int(length) if length else None

        self._etag = headers.get(ETAG) or None
        self._manifest = headers.get(X_OBJECT_MANIFEST) or None

        last_modified = headers.get(LAST_MODIFIED)
        self._last_modified = parsedate_to_datetime(last_modified) if last_modified else None

        self._custom = {}
        for name, value in headers.items():
            key = meta_key(name)
            if key:
                self._custom[key] = value

        self._dirty.clear()

    def apply_listing(self, *, size: Optional[int], etag: Optional[str],
                      content_type: Optional[str], last_modified: Optional[datetime]) -> None:
        """Populate fields from a container listing entry."""
        self._content_length = size
        self._etag = etag
        self.content_type = content_type
        self._last_modified = last_modified
