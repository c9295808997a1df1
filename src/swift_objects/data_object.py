"""
Data object resource.

Client-side representation of one stored object. Setters change local
metadata only; ``update()`` and ``save_metadata()`` flush the changes in a
single request. Every other operation issues at most one request through the
account transport, except symlink creation which checks size first.
"""
from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Union

import httpx

from .metadata import MetadataStore
from .models import ObjectListingEntry
from .storage.base import UrlType
from .storage.errors import CdnNotAvailableError, MissingNameError, PseudoDirectoryError
from .storage.headers import DESTINATION
from .storage.paths import parse_object_path
from .symlink import SymlinkManager
from .temp_url import TemporaryUrlBuilder

if TYPE_CHECKING:
    from .container import Container

__all__ = ["DataObject"]

logger = logging.getLogger(__name__)


class DataObject:
    """
    One object in a container.

    The object owns its MetadataStore and references (never owns) its
    container. Mutating operations on the same instance must not run
    concurrently: dirty tracking is not synchronised.
    """

    def __init__(self, container: Container, name: Optional[str] = None, *,
                 directory: bool = False,
                 url_builder: Optional[TemporaryUrlBuilder] = None,
                 symlinks: Optional[SymlinkManager] = None,
                 clock: Callable[[], float] = time.time):
        self.container = container
        self.name = name
        self._directory = directory
        self._metadata = MetadataStore()
        self._url_builder = url_builder or TemporaryUrlBuilder(clock=clock)
        self._symlinks = symlinks or SymlinkManager()
        self._clock = clock

    def __repr__(self) -> str:
        kind = "directory" if self._directory else "object"
        return f"DataObject({self.container.name!r}, {self.name!r}, {kind})"

    @classmethod
    def from_listing(cls, container: Container,
                     entry: Union[ObjectListingEntry, Mapping[str, Any]]) -> DataObject:
        """
        Build an object from a container listing entry.

        ``{"subdir": "photos/"}`` entries become pseudo-directories named after
        the prefix; other entries are populated from the listed size, hash,
        content type and modification time without a request.
        """
        if not isinstance(entry, ObjectListingEntry):
            entry = ObjectListingEntry.model_validate(entry)

        if entry.is_directory:
            return cls(container, entry.subdir, directory=True)

        obj = cls(container, entry.name)
        obj._metadata.apply_listing(
            size=entry.size,
            etag=entry.etag,
            content_type=entry.content_type,
            last_modified=entry.last_modified,
        )
        return obj

    # Identity

    def get_name(self) -> Optional[str]:
        return self.name

    def is_directory(self) -> bool:
        return self._directory

    @property
    def metadata_store(self) -> MetadataStore:
        return self._metadata

    def ensure_object(self) -> None:
        """Raise PseudoDirectoryError for listing prefixes."""
        if self._directory:
            raise PseudoDirectoryError(f"{self.name} is a pseudo-directory, not an object")

    def _require_name(self, action: str) -> str:
        if not self.name:
            raise MissingNameError(f"Cannot {action} an object without a name")
        self.ensure_object()
        return self.name

    # Read accessors

    @property
    def content_type(self) -> Optional[str]:
        return self._metadata.content_type

    @property
    def content_disposition(self) -> Optional[str]:
        return self._metadata.content_disposition

    @property
    def content_encoding(self) -> Optional[str]:
        return self._metadata.content_encoding

    @property
    def content_length(self) -> Optional[int]:
        return self._metadata.content_length

    @property
    def etag(self) -> Optional[str]:
        return self._metadata.etag

    @property
    def manifest(self) -> Optional[str]:
        return self._metadata.manifest

    @property
    def last_modified(self) -> Optional[datetime]:
        return self._metadata.last_modified

    @property
    def metadata(self) -> Dict[str, str]:
        return self._metadata.custom

    # Deferred setters (flushed by update / save_metadata)

    def set_content_type(self, value: str) -> DataObject:
        self._metadata.set_field("content_type", value)
        return self

    def set_content_disposition(self, value: str) -> DataObject:
        self._metadata.set_field("content_disposition", value)
        return self

    def set_content_encoding(self, value: str) -> DataObject:
        self._metadata.set_field("content_encoding", value)
        return self

    def get_delete_at_time(self) -> Optional[datetime]:
        return self._metadata.delete_at

    def set_delete_at_time(self, when: datetime) -> DataObject:
        self._metadata.set_delete_at(when)
        return self

    def set_delete_after(self, seconds: int) -> DataObject:
        """Schedule deletion ``seconds`` from the current wall-clock time."""
        self._metadata.set_delete_after(seconds, now=self._clock())
        return self

    # Remote operations

    def get_url(self, internal: Optional[bool] = None) -> str:
        """
        Return the object URL (container URL + per-segment encoded name).

        Raises:
            MissingNameError: If the object has no name
        """
        name = self._require_name("build a URL for")
        return self.container.object_url(name, internal=internal)

    def retrieve_metadata(self) -> DataObject:
        """
        Replace local metadata with the server's (one HEAD request).

        Headers absent from the response clear the matching fields.
        """
        self._require_name("retrieve metadata for")
        response = self._send("HEAD")
        self._metadata.apply_headers(response.headers)
        return self

    refresh = retrieve_metadata

    def update(self) -> DataObject:
        """
        Flush dirty metadata with one POST request.

        Dirty flags are cleared only after the request succeeds; nothing is
        sent when nothing is dirty.
        """
        self._require_name("update")
        if not self._metadata.is_dirty():
            logger.debug(f"No metadata changes to flush for {self.container.name}/{self.name}")
            return self
        self._flush()
        return self

    def save_metadata(self, pairs: Optional[Mapping[str, str]] = None) -> httpx.Response:
        """
        Merge ``pairs`` into custom metadata and flush everything dirty.

        Pending system changes (content type, disposition, encoding,
        delete-at) travel in the same request.
        """
        self._require_name("save metadata for")
        self._metadata.merge_custom(pairs or {})
        return self._flush()

    def delete(self, params: Optional[Mapping[str, str]] = None) -> httpx.Response:
        """Delete the object; server-side failures propagate unchanged."""
        self._require_name("delete")
        return self._send("DELETE", params=params)

    def copy(self, destination: Optional[str]) -> httpx.Response:
        """
        Server-side copy to ``destination`` (``container/object``).

        Raises:
            MissingNameError: If destination or the object name is empty
        """
        if not destination:
            raise MissingNameError("Copy destination cannot be empty")
        self._require_name("copy")
        target = parse_object_path(destination)
        return self._send("COPY", headers={DESTINATION: target.destination})

    def get_temporary_url(self, expires_in: int, method: str, force_public: bool = False) -> str:
        """Return a signed URL valid for ``method`` during ``expires_in`` seconds."""
        self.ensure_object()
        return self._url_builder.build(self, method, expires_in, force_public=force_public)

    def create_symlink_to(self, target_path: Optional[str]) -> httpx.Response:
        return self._symlinks.create_symlink_to(self, target_path)

    def create_symlink_from(self, source_path: Optional[str]) -> DataObject:
        return self._symlinks.create_symlink_from(self, source_path)

    def get_public_url(self, url_type: UrlType = UrlType.CDN) -> Optional[str]:
        """Return a CDN URL, or None when the container is not CDN-enabled."""
        name = self._require_name("build a public URL for")
        cdn = self.container.cdn
        if cdn is None or not cdn.is_cdn_enabled():
            return None
        return cdn.public_url(name, url_type)

    def purge(self, *emails: str) -> httpx.Response:
        """Purge the object from the CDN edge, notifying ``emails`` when done."""
        name = self._require_name("purge")
        cdn = self.container.cdn
        if cdn is None:
            raise CdnNotAvailableError(f"Container {self.container.name} has no CDN configured")
        return cdn.purge(name, emails)

    def _flush(self) -> httpx.Response:
        headers = self._metadata.dirty_headers()
        logger.debug(f"Flushing {sorted(headers)} for {self.container.name}/{self.name}")
        response = self._send("POST", headers=headers)
        self._metadata.mark_clean()
        return response

    def _send(self, method: str, headers: Optional[Mapping[str, str]] = None,
              params: Optional[Mapping[str, str]] = None) -> httpx.Response:
        request = httpx.Request(method, self.get_url(), headers=headers, params=params)
        return self.container.account.transport.send(request)
