"""
Symlink-style aliasing through the X-Object-Manifest header.

A symlink is a zero-byte object whose manifest header names another
``container/object``. The manifest is written with a PUT of an empty body,
which replaces the link object's content, so both the object being
overwritten and the pointed-to object must be empty at the moment of
linking. The checks are reads immediately followed by the write, with no
guarantee the objects stay empty afterwards.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from .storage.base import ObjectSizer
from .storage.errors import MissingNameError, ObjectNotEmptyError, ObjectNotFoundError
from .storage.headers import X_OBJECT_MANIFEST
from .storage.paths import ObjectPath, parse_object_path

if TYPE_CHECKING:
    from .container import Container
    from .data_object import DataObject

__all__ = ["SymlinkManager"]

logger = logging.getLogger(__name__)


class SymlinkManager:
    """Creates manifest links between objects of one account."""

    def create_symlink_to(self, obj: DataObject, target_path: str) -> httpx.Response:
        """
        Turn ``obj`` into a link pointing at ``target_path``.

        Args:
            obj: Object that receives the manifest header
            target_path: ``container/object`` the link points at

        Returns:
            Raw response of the manifest write

        Raises:
            MissingNameError: If target_path or the object name is empty
            ObjectNotEmptyError: If ``obj`` or the target has content; nothing is written
            TransportError: If a size check or the write fails
        """
        if not target_path:
            raise MissingNameError("Symlink target path cannot be empty")
        if not obj.name:
            raise MissingNameError("Cannot create a symlink from an object without a name")
        obj.ensure_object()

        target = parse_object_path(target_path)
        link = ObjectPath(obj.container.name, obj.name, f"{obj.container.name}/{obj.name}")
        self._require_empty(obj.container, link)
        self._require_empty(obj.container.account.container(target.container), target)

        response = self._write_manifest(obj.container, obj.name, str(target))
        obj.metadata_store.set_manifest(str(target))
        return response

    def create_symlink_from(self, obj: DataObject, source_path: str) -> DataObject:
        """
        Create a link at ``source_path`` pointing at ``obj``.

        Args:
            obj: Object the new link points at
            source_path: ``container/object`` where the link is written

        Returns:
            The link object, refreshed from the server

        Raises:
            MissingNameError: If source_path or the object name is empty
            ObjectNotEmptyError: If the source or ``obj`` has content; nothing is written
            TransportError: If a size check, the write or the refresh fails
        """
        if not source_path:
            raise MissingNameError("Symlink source path cannot be empty")
        if not obj.name:
            raise MissingNameError("Cannot create a symlink to an object without a name")
        obj.ensure_object()

        source = parse_object_path(source_path)
        source_container = obj.container.account.container(source.container)
        target = f"{obj.container.name}/{obj.name}"
        self._require_empty(source_container, source)
        self._require_empty(obj.container, ObjectPath(obj.container.name, obj.name, target))

        self._write_manifest(source_container, source.name, target)
        return source_container.data_object(source.name)

    def _require_empty(self, sizer: ObjectSizer, path: ObjectPath) -> None:
        try:
            size = sizer.object_size(path.name)
        except ObjectNotFoundError:
            logger.debug(f"Object {path} does not exist yet, treating as empty")
            return
        if size > 0:
            raise ObjectNotEmptyError(str(path), size)

    def _write_manifest(self, container: Container, name: str, manifest: str) -> httpx.Response:
        logger.debug(f"Linking {container.name}/{name} -> {manifest}")
        request = httpx.Request(
            "PUT",
            container.object_url(name),
            headers={X_OBJECT_MANIFEST: manifest},
            content=b"",
        )
        return container.account.transport.send(request)
